from __future__ import annotations

import re


# Dot separated pre-release or build identifiers, e.g. "rc.1" or "exp.sha.5114f85".
_IDENTIFIERS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

# A pre-release follows a hyphen, or comes right after the release
# when it starts with a letter ("1.0b1").
_COMPLETE_VERSION = (
    r"v?(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.(\d+))?"
    rf"(?:(?:-|(?=[A-Za-z]))({_IDENTIFIERS}))?"
    rf"(?:\+({_IDENTIFIERS}))?"
)

COMPLETE_VERSION = re.compile(f"(?i)^{_COMPLETE_VERSION}$")

CARET_CONSTRAINT = re.compile(rf"(?i)^\^\s*({_COMPLETE_VERSION})$")
TILDE_CONSTRAINT = re.compile(rf"(?i)^~(?!=)\s*({_COMPLETE_VERSION})$")
X_CONSTRAINT = re.compile(r"^(!=|==)?\s*v?(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.[xX*])+$")
BASIC_CONSTRAINT = re.compile(rf"(?i)^(<>|!=|>=?|<=?|==?)?\s*({_COMPLETE_VERSION})$")
ANY_CONSTRAINT = re.compile(r"(?i)^v?[xX*](\.[xX*])*$")

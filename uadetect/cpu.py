# uadetect/cpu.py

import re
from typing import List, Tuple

from uadetect.schemas import CPUArchitecture, CPUResult

# Most specific first - first match wins.
# "aarch64 ... arm" resolves to arm64, "armv7l" to armhf before plain arm.
ARCHITECTURE_PATTERNS: List[Tuple[CPUArchitecture, re.Pattern]] = [
    (CPUArchitecture.AMD64, re.compile(r"\b(amd64|x64|x86[-_]?64|wow64|win64)\b", re.IGNORECASE | re.ASCII)),
    (CPUArchitecture.ARM64, re.compile(r"\b(aarch64|armv?[89]e?l?|arm_?64)\b", re.IGNORECASE | re.ASCII)),
    (CPUArchitecture.ARMHF, re.compile(r"\barmv[67](?:ht?n?[fl]p?|[hl])\b", re.IGNORECASE | re.ASCII)),
    (CPUArchitecture.ARM, re.compile(r"\barm\b", re.IGNORECASE | re.ASCII)),
    (CPUArchitecture.IA32, re.compile(r"\b(ia32|i[3-6]86|x86|win32)\b", re.IGNORECASE | re.ASCII)),
    (CPUArchitecture.SPARC, re.compile(r"\b(?:sparc|sun4u|sunos)\b", re.IGNORECASE | re.ASCII)),
]


def determine_architecture(user_agent: str, platform: str) -> CPUArchitecture:
    combined = f"{user_agent} {platform}".lower()

    for architecture, pattern in ARCHITECTURE_PATTERNS:
        if pattern.search(combined):
            return architecture

    return CPUArchitecture.UNKNOWN


def detect_cpu(user_agent: str, platform: str) -> CPUResult:
    """
    CPU architecture from the user agent and platform strings.

    Platforms that misreport their silicon (Apple Silicon Macs report
    "MacIntel") are taken at their word.
    """
    return CPUResult(architecture=determine_architecture(user_agent, platform))

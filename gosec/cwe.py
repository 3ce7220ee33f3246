"""Common Weakness Enumeration entries referenced by the scanner's rules."""

from __future__ import annotations

from dataclasses import dataclass

ACRONYM = "CWE"
VERSION = "4.4"
RELEASE_DATE_UTC = "2021-03-15"
ORGANIZATION = "MITRE"
DESCRIPTION = "The MITRE Common Weakness Enumeration"

INFORMATION_URI = f"https://cwe.mitre.org/data/published/cwe_v{VERSION}.pdf/"
DOWNLOAD_URI = f"https://cwe.mitre.org/data/xml/cwec_v{VERSION}.xml.zip"

_DEFINITION_URL = "https://cwe.mitre.org/data/definitions/{}.html"


@dataclass(frozen=True)
class Weakness:
    """A single CWE weakness."""

    id: str
    name: str = ""
    description: str = ""

    def sprint_url(self) -> str:
        """Return the URL of the weakness definition."""
        return _DEFINITION_URL.format(self.id)

    def sprint_id(self) -> str:
        """Return the identifier in the ``CWE-<id>`` form."""
        return f"{ACRONYM}-{self.id}"

    def to_json(self) -> dict[str, str]:
        """Return the JSON representation: only the id and the URL."""
        return {"id": self.id, "url": self.sprint_url()}


_WEAKNESSES = (
    Weakness(
        id="118",
        description=(
            "The software does not restrict or incorrectly restricts operations within the "
            "boundaries of a resource that is accessed using an index or pointer, such as "
            "memory or files."
        ),
        name="Incorrect Access of Indexable Resource ('Range Error')",
    ),
    Weakness(
        id="190",
        description=(
            "The software performs a calculation that can produce an integer overflow or "
            "wraparound, when the logic assumes that the resulting value will always be "
            "larger than the original value. This can introduce other weaknesses when the "
            "calculation is used for resource management or execution control."
        ),
        name="Integer Overflow or Wraparound",
    ),
    Weakness(
        id="200",
        description=(
            "The product exposes sensitive information to an actor that is not explicitly "
            "authorized to have access to that information."
        ),
        name="Exposure of Sensitive Information to an Unauthorized Actor",
    ),
    Weakness(
        id="22",
        description=(
            "The software uses external input to construct a pathname that is intended to "
            "identify a file or directory that is located underneath a restricted parent "
            "directory, but the software does not properly neutralize special elements "
            "within the pathname that can cause the pathname to resolve to a location that "
            "is outside of the restricted directory."
        ),
        name="Improper Limitation of a Pathname to a Restricted Directory ('Path Traversal')",
    ),
    Weakness(
        id="242",
        description="The program calls a function that can never be guaranteed to work safely.",
        name="Use of Inherently Dangerous Function",
    ),
    Weakness(
        id="276",
        description=(
            "During installation, installed file permissions are set to allow anyone to "
            "modify those files."
        ),
        name="Incorrect Default Permissions",
    ),
    Weakness(
        id="295",
        description="The software does not validate, or incorrectly validates, a certificate.",
        name="Improper Certificate Validation",
    ),
    Weakness(
        id="310",
        description=(
            "Weaknesses in this category are related to the design and implementation of "
            "data confidentiality and integrity. Frequently these deal with the use of "
            "encoding techniques, encryption libraries, and hashing algorithms. The "
            "weaknesses in this category could lead to a degradation of the quality data "
            "if they are not addressed."
        ),
        name="Cryptographic Issues",
    ),
    Weakness(
        id="322",
        description=(
            "The software performs a key exchange with an actor without verifying the "
            "identity of that actor."
        ),
        name="Key Exchange without Entity Authentication",
    ),
    Weakness(
        id="326",
        description=(
            "The software stores or transmits sensitive data using an encryption scheme "
            "that is theoretically sound, but is not strong enough for the level of "
            "protection required."
        ),
        name="Inadequate Encryption Strength",
    ),
    Weakness(
        id="327",
        description=(
            "The use of a broken or risky cryptographic algorithm is an unnecessary risk "
            "that may result in the exposure of sensitive information."
        ),
        name="Use of a Broken or Risky Cryptographic Algorithm",
    ),
    Weakness(
        id="338",
        description=(
            "The product uses a Pseudo-Random Number Generator (PRNG) in a security "
            "context, but the PRNG's algorithm is not cryptographically strong."
        ),
        name="Use of Cryptographically Weak Pseudo-Random Number Generator (PRNG)",
    ),
    Weakness(
        id="377",
        description=(
            "Creating and using insecure temporary files can leave application and system "
            "data vulnerable to attack."
        ),
        name="Insecure Temporary File",
    ),
    Weakness(
        id="409",
        description=(
            "The software does not handle or incorrectly handles a compressed input with a "
            "very high compression ratio that produces a large output."
        ),
        name="Improper Handling of Highly Compressed Data (Data Amplification)",
    ),
    Weakness(
        id="703",
        description=(
            "The software does not properly anticipate or handle exceptional conditions "
            "that rarely occur during normal operation of the software."
        ),
        name="Improper Check or Handling of Exceptional Conditions",
    ),
    Weakness(
        id="78",
        description=(
            "The software constructs all or part of an OS command using "
            "externally-influenced input from an upstream component, but it does not "
            "neutralize or incorrectly neutralizes special elements that could modify the "
            "intended OS command when it is sent to a downstream component."
        ),
        name=(
            "Improper Neutralization of Special Elements used in an OS Command "
            "('OS Command Injection')"
        ),
    ),
    Weakness(
        id="79",
        description=(
            "The software does not neutralize or incorrectly neutralizes "
            "user-controllable input before it is placed in output that is used as a web "
            "page that is served to other users."
        ),
        name=(
            "Improper Neutralization of Input During Web Page Generation "
            "('Cross-site Scripting')"
        ),
    ),
    Weakness(
        id="798",
        description=(
            "The software contains hard-coded credentials, such as a password or "
            "cryptographic key, which it uses for its own inbound authentication, outbound "
            "communication to external components, or encryption of internal data."
        ),
        name="Use of Hard-coded Credentials",
    ),
    Weakness(
        id="88",
        description=(
            "The software constructs a string for a command to executed by a separate "
            "component\nin another control sphere, but it does not properly delimit the\n"
            "intended arguments, options, or switches within that command string."
        ),
        name=(
            "Improper Neutralization of Argument Delimiters in a Command "
            "('Argument Injection')"
        ),
    ),
    Weakness(
        id="89",
        description=(
            "The software constructs all or part of an SQL command using "
            "externally-influenced input from an upstream component, but it does not "
            "neutralize or incorrectly neutralizes special elements that could modify the "
            "intended SQL command when it is sent to a downstream component."
        ),
        name=(
            "Improper Neutralization of Special Elements used in an SQL Command "
            "('SQL Injection')"
        ),
    ),
)

_DATA = {weakness.id: weakness for weakness in _WEAKNESSES}


def get(weakness_id: str) -> Weakness | None:
    """Return the weakness with the given id, or None when it is unknown."""
    return _DATA.get(weakness_id)
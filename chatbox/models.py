"""Model names and default values.

This module centralises the fixed values used across the engine: the
completion model, its decoding parameters, the response format
contract and the sentinels written into contexts and chat entries.
Other modules import these rather than hard-coding them.
"""

# The one completion model the engine talks to
DEFAULT_MODEL = "chatgpt-4o-latest"

# Decoding parameters are fixed; they are not exposed to callers
DEFAULT_TEMPERATURE = 1.0

# Provider-level contract: the reply must be a single JSON object
RESPONSE_FORMAT = {"type": "json_object"}

# Used when the page has no readable language selector
UNKNOWN_LANGUAGE = "UNKNOWN"

# Stored as the raw message of every assistant entry
ASSISTANT_PLACEHOLDER = "NA"

# Used when neither the host nor the page supplies a problem statement
DEFAULT_PROBLEM_STATEMENT = "Enter your problem statement here"

# Key of the secret inside the credential key-value area
CREDENTIAL_KEY = "apiKey"

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_TEMPERATURE",
    "RESPONSE_FORMAT",
    "UNKNOWN_LANGUAGE",
    "ASSISTANT_PLACEHOLDER",
    "DEFAULT_PROBLEM_STATEMENT",
    "CREDENTIAL_KEY",
]

"""
passforge Settings - Generation settings and results.
"""

import enum
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Optional

from passforge.core.random_source import ContractViolation

# In-band results for normal, user-reachable empty states
NO_CHARACTERS = "Select character types"
WORDLIST_UNAVAILABLE = "Wordlist unavailable"


class Mode(enum.Enum):
    RANDOM = "random"
    PASSPHRASE = "passphrase"


@dataclass(frozen=True)
class PasswordSettings:
    """Settings for one generation call. Fields not used by `mode` are ignored."""

    mode: Mode = Mode.RANDOM

    # Random mode
    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False
    min_digits: int = 1
    min_symbols: int = 1

    # Passphrase mode
    word_count: int = 4
    separator: str = "-"
    capitalize_words: bool = True
    add_numbers: bool = False

    def __post_init__(self):
        if not isinstance(self.mode, Mode):
            try:
                object.__setattr__(self, 'mode', Mode(self.mode))
            except ValueError:
                raise ContractViolation(f"Unknown mode: {self.mode!r}") from None

    @property
    def required_digits(self) -> int:
        """Guaranteed digit count; 0 when digits are disabled."""
        return self.min_digits if self.include_numbers else 0

    @property
    def required_symbols(self) -> int:
        """Guaranteed symbol count; 0 when symbols are disabled."""
        return self.min_symbols if self.include_symbols else 0

    def _check_types(self) -> None:
        # Values from JSON config files and dataclasses.replace() are unchecked
        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            # bool is an int subclass; True is not a length
            if expected is int and isinstance(value, bool) or not isinstance(value, expected):
                raise ContractViolation(
                    f"{name} must be {expected.__name__}, got {value!r}"
                )

    def validate(self) -> None:
        """
        Check caller preconditions for the active mode.

        Raises:
            ContractViolation: On mistyped, negative or inconsistent values
        """
        self._check_types()
        if self.mode is Mode.RANDOM:
            if self.length < 1:
                raise ContractViolation(f"length must be >= 1, got {self.length}")
            if self.min_digits < 0 or self.min_symbols < 0:
                raise ContractViolation(
                    f"Minimums must be >= 0 (min_digits={self.min_digits}, "
                    f"min_symbols={self.min_symbols})"
                )
            required = self.required_digits + self.required_symbols
            if required > self.length:
                raise ContractViolation(
                    f"min_digits + min_symbols ({required}) exceeds length ({self.length})"
                )
        else:
            if self.word_count < 1:
                raise ContractViolation(f"word_count must be >= 1, got {self.word_count}")

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['mode'] = self.mode.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PasswordSettings":
        """Build settings from a flat mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


_FIELD_TYPES = {f.name: f.type for f in fields(PasswordSettings) if f.name != 'mode'}


@dataclass(frozen=True)
class GeneratedSecret:
    """A generated secret and the settings that produced it."""

    secret: str
    settings: PasswordSettings
    error: Optional[str] = None
    source: str = field(default="CSPRNG", compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        return self.secret if self.ok else self.error

    def __repr__(self) -> str:
        # Keep the secret out of logs and tracebacks
        if self.ok:
            return f"GeneratedSecret(<{len(self.secret)} chars>, mode={self.settings.mode.value})"
        return f"GeneratedSecret(error={self.error!r})"

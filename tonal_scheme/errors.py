"""Exception hierarchy for tonal-scheme.

All errors raised by the library inherit from TonalSchemeError and from
ValueError, so callers can catch either the library base or the builtin.

```
TonalSchemeError
├── FormatError        malformed color string or object
├── PaletteRangeError  palette size < 9, bad lightness bounds, tone outside 1-10
└── ConfigError        bad scheme options, rule overrides or custom colors
```
"""


class TonalSchemeError(Exception):
    """
    Base exception for all tonal-scheme errors.

    Attributes:
        user_message: Short message describing the problem
        technical_message: Detailed message for logs (defaults to user_message)
        recovery_hint: Optional hint for how to fix the input
    """

    def __init__(self, user_message, technical_message=None, recovery_hint=None):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self):
        return self.user_message

    def get_full_message(self):
        """Get complete error message with recovery hint."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg


class FormatError(TonalSchemeError, ValueError):
    """A color value could not be parsed."""

    def __init__(self, value, expected=None):
        self.value = value
        self.expected = expected
        message = f"Invalid color value: {value!r}"
        if expected:
            message += f" (expected {expected})"
        super().__init__(
            message,
            recovery_hint="Use #RRGGBB, #RGB, rgb(r, g, b), hsl(h, s%, l%) "
            "or an r/g/b or h/s/l mapping",
        )


class PaletteRangeError(TonalSchemeError, ValueError):
    """A palette size, lightness bound or tone index is out of range."""


class ConfigError(TonalSchemeError, ValueError):
    """Scheme options, rule overrides or custom colors are invalid."""

    def __init__(self, user_message, key=None, value=None, recovery_hint=None):
        self.key = key
        self.value = value
        technical = user_message
        if key is not None:
            technical = f"{user_message} [key={key!r}, value={value!r}]"
        super().__init__(user_message, technical, recovery_hint)

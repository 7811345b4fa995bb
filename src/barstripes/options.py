from dataclasses import dataclass, fields

from .errors import ConfigurationConflict


@dataclass(frozen=True)
class EncodingOptions:
    """Options recognised by every encoder.

    :param bool add_check:     compute and append check characters instead
                               of verifying the ones present in the data
    :param str bar_char:       character written for a bar unit
    :param str space_char:     character written for a space unit
    :param bool auto_promote:  Code93 only, convert data to full ASCII
                               shift pairs before computing the checksum
    """
    add_check: bool = False
    bar_char: str = "1"
    space_char: str = "0"
    auto_promote: bool = False

    def __post_init__(self):
        for name in ("bar_char", "space_char"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ConfigurationConflict(
                    "{} must be a single character, got {!r}".format(
                        name, value
                    )
                )
        if self.bar_char == self.space_char:
            raise ConfigurationConflict(
                "bar_char and space_char must differ, both are {!r}".format(
                    self.bar_char
                )
            )
        if self.auto_promote and not self.add_check:
            # promotion changes the data, so the checksum has to be computed
            raise ConfigurationConflict(
                "auto_promote is only possible together with add_check"
            )

    @classmethod
    def names(cls):
        return tuple(field.name for field in fields(cls))

    @classmethod
    def from_mapping(cls, mapping):
        """Build options from a dictionary, rejecting unknown keys

        :param dict mapping:    option names and values
        :return:                EncodingOptions instance"""
        known = cls.names()
        unknown = sorted(key for key in mapping if key not in known)
        if unknown:
            raise ConfigurationConflict(
                "Unknown encoding option(s): {}".format(", ".join(unknown))
            )
        return cls(**mapping)

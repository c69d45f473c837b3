from enum import StrEnum


class StringEnum(StrEnum):
    """
    A StrEnum subclass that behaves like a plain string in all representations.

    repr() returns just the value instead of the enum member representation,
    so enum values can be dropped into rendered configuration verbatim.
    """

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return self.value.__format__(format_spec)

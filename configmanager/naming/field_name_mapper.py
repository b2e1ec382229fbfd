from typing import Protocol


class NameMapping(Protocol):
    """Converts a field name into a configuration key."""

    def map(self, name: str | None) -> str | None:
        ...


class FieldNameMapper:
    """Maps camelCase field names to snake_case configuration keys.

    Every upper-case character after the first one gets its own underscore,
    so acronyms are split letter by letter:

        dbHost      -> db_host
        HTTPClient  -> h_t_t_p_client
    """

    def map(self, name: str | None) -> str | None:
        """Map a field name to a key. ``None`` and ``""`` are returned as is."""
        if not name:
            return name

        result = [name[0].lower()]
        for ch in name[1:]:
            if ch.isupper():
                result.append("_")
                result.append(ch.lower())
            else:
                result.append(ch)

        return "".join(result)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


_default_mapper = FieldNameMapper()


def name_mapping(name: str | None) -> str | None:
    """Map a field name with the default FieldNameMapper."""
    return _default_mapper.map(name)

# errors.py


class NetworkDataError(ValueError):
    """Base class for data-integrity failures in the layout/aggregation engine."""


class InvalidInputError(NetworkDataError):
    pass


class DuplicateEntityError(NetworkDataError):
    def __init__(self, entity_id: str):
        super().__init__(f"Duplicate entity id: {entity_id!r}")
        self.entity_id = entity_id


class MissingEntityError(NetworkDataError, KeyError):
    def __init__(self, entity_id: str, context: str = ""):
        where = f" ({context})" if context else ""
        super().__init__(f"Unknown entity id: {entity_id!r}{where}")
        self.entity_id = entity_id

    # KeyError.__str__ would repr() the message
    def __str__(self) -> str:
        return str(self.args[0])

class BaseModel:
    """
    Base class for models exchanged with the remote endpoint
    """
    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented

        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f'{self.__class__.__name__}({self.to_dict()!r})'

    def to_dict(self) -> dict:
        """
        Serialise the model into its wire representation.
        :return: A dictionary representation of the model
        """
        raise NotImplementedError

    @classmethod
    def from_dict(cls, payload: dict) -> 'BaseModel':
        """
        Build the model from its wire representation.
        :param payload: A dictionary in the wire format
        :return: An instance of the model
        """
        raise NotImplementedError

# geokernel/utils/identity.py
from geokernel.utils.base_model import ImmutableModel


class IdentityModel(ImmutableModel):
    """
    Immutable model whose equality is object identity.

    Two instances holding the same values are still different objects: a set
    of a thousand coordinate-equal points has a thousand members. Value
    comparison is never done through ``==``; subclasses expose an explicit
    tolerant comparison instead.
    """

    def __hash__(self):
        return id(self)

    def __eq__(self, other):
        return self is other

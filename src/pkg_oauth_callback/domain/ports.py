from __future__ import annotations

from typing import Protocol, TypeVar, Union

from .entities import NoMatch

T_co = TypeVar("T_co", covariant=True)


class FragmentDecoder(Protocol[T_co]):
    """
    Port for turning a callback fragment into a typed record.

    Implementations live in the adapters layer (e.g. the implicit-flow
    decoders).
    """

    def decode(self, fragment: str) -> Union[T_co, NoMatch]:
        """
        Decode the given fragment.

        Should:
          - return NoMatch when the fragment is not of this decoder's shape
          - never raise for malformed or missing individual fields
        """
        ...

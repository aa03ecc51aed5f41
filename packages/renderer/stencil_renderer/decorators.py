"""Ordered chain of output transforms applied after every registered render."""

from typing import Callable, List

from stencil_common.errors import DecoratorError

Decorator = Callable[[str], str]


class DecoratorChain:
    """
    Decorators in registration order.

    ``apply`` folds the output through every decorator, so ``[a, b]`` yields
    ``b(a(output))``. There is no removal of single decorators, only
    ``reset``.
    """

    def __init__(self) -> None:
        self._decorators: List[Decorator] = []

    def add(self, decorator: Decorator) -> None:
        if not callable(decorator):
            raise TypeError("decorator must be callable")
        self._decorators.append(decorator)

    def reset(self) -> None:
        self._decorators = []

    def apply(self, output: str) -> str:
        """
        Run ``output`` through the chain.

        Raises:
            DecoratorError: a decorator raised; remaining decorators are skipped
        """
        for decorator in list(self._decorators):
            try:
                output = decorator(output)
            except Exception as e:
                name = getattr(decorator, "__name__", repr(decorator))
                raise DecoratorError(str(e), decorator=name) from e
        return output

    def __len__(self) -> int:
        return len(self._decorators)

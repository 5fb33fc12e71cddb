""" Helpers to load plugins from entrypoints. """

from __future__ import annotations

import logging
import typing as t

import importlib_metadata

T = t.TypeVar("T")

logger = logging.getLogger(__name__)


def iter_entrypoints(group: type[T]) -> t.Iterator[tuple[str, t.Callable[[], type[T]]]]:
    """Iterates over the entrypoints registered in the group named by the `ENTRYPOINT` attribute of *group*. Yields
    the entrypoint name and a function that loads the entrypoint and checks that it is a subclass of *group*."""

    group_name: str = group.ENTRYPOINT  # type: ignore[attr-defined]

    def _make_loader(ep: importlib_metadata.EntryPoint) -> t.Callable[[], type[T]]:
        def loader() -> type[T]:
            value = ep.load()
            if not isinstance(value, type):
                raise TypeError(
                    f'entrypoint "{ep.name}" in group "{group_name}" is not a type (found "{type(value).__name__}")'
                )
            if not issubclass(value, group):
                raise TypeError(f'entrypoint "{ep.name}" in group "{group_name}" is not a subclass of {group.__name__}')
            return value

        return loader

    for ep in importlib_metadata.entry_points(group=group_name):
        logger.debug("Found entrypoint <subj>%s</subj> in group <val>%s</val>", ep.name, group_name)
        yield ep.name, _make_loader(ep)

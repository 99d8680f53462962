"""Per-buffer registry of contexts.

Each open view (editor buffer, terminal pane, ...) owns exactly one
:class:`~brainmode.context.Context`. Contexts in different buffers are
independent; a new view opened from an existing one gets a clone.

Typical usage::

    store = ContextStore()
    store.open("*brain*")
    store.clone("*brain*", "*brain-2*", line=12)
    store.close("*brain*")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from brainmode.context import Context, clone_context, default_context
from brainmode.errors import ContextNotFoundError

if TYPE_CHECKING:
    from brainmode.config import ContextDefaults

logger = logging.getLogger(__name__)


class ContextStore:
    """Holds one context per buffer id.

    Args:
        defaults: Optional :class:`~brainmode.config.ContextDefaults` used
            for every context opened without an explicit one.
    """

    def __init__(self, defaults: Optional[ContextDefaults] = None) -> None:
        self._defaults = defaults
        self._contexts: dict[str, Context] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def open(self, buffer_id: str, context: Optional[Context] = None) -> Context:
        """Attach a context to *buffer_id*, replacing any existing one.

        Args:
            buffer_id: The buffer the context belongs to.
            context: The context to attach. A default context is built
                when omitted.

        Returns:
            The attached context.
        """
        ctx = context if context is not None else default_context(self._defaults)
        if buffer_id in self._contexts:
            logger.debug("Replacing context of buffer %s", buffer_id)
        self._contexts[buffer_id] = ctx
        return ctx

    def get(self, buffer_id: str) -> Context:
        """Return the context of *buffer_id*.

        Raises:
            ContextNotFoundError: If no context is open for the buffer.
        """
        try:
            return self._contexts[buffer_id]
        except KeyError:
            raise ContextNotFoundError(buffer_id) from None

    def find(self, buffer_id: str) -> Optional[Context]:
        """Return the context of *buffer_id*, or ``None``."""
        return self._contexts.get(buffer_id)

    def clone(
        self,
        source_id: str,
        target_id: str,
        line: Optional[int] = None,
    ) -> Context:
        """Open *target_id* with a clone of the context of *source_id*.

        Args:
            source_id: Buffer whose context is copied.
            target_id: Buffer that receives the copy.
            line: Current cursor line of the source buffer, recorded on
                the source before copying.

        Raises:
            ContextNotFoundError: If *source_id* has no context.
        """
        source = self.get(source_id)
        return self.open(target_id, clone_context(source, line=line))

    def close(self, buffer_id: str) -> None:
        """Drop the context of *buffer_id*. Closing twice is harmless."""
        if self._contexts.pop(buffer_id, None) is not None:
            logger.debug("Closed context of buffer %s", buffer_id)

    def buffers(self) -> list[str]:
        """Ids of all buffers with an open context, in opening order."""
        return list(self._contexts)

    def __contains__(self, buffer_id: object) -> bool:
        return buffer_id in self._contexts

    def __len__(self) -> int:
        return len(self._contexts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._contexts)

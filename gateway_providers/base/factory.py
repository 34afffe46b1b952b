"""Provider Factory utilities.

Purpose
-------
Centralize provider-agnostic creation of adapter instances implementing the
``ProviderAdapter`` protocol. Adapters are imported lazily using ``importlib``
so importing the router does not pull in every vendor SDK up front.

Failure semantics
-----------------
The factory performs no retries or fallbacks; it either returns an instance
or raises :class:`UnknownProviderError`.

Scope
-----
Supported providers: ``openai`` and ``anthropic``. Adding a backend means
writing its adapter module and appending one entry to ``_PROVIDERS``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type

from .dto.adapter_params import AdapterParams


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter constructor raised an exception during initialization.
    """


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Compatibility helper that delegates to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create provider adapters based on a canonical name (e.g., ``"openai"``).

    Design notes
    ------------
    - Uses ``importlib.import_module`` for explicit import semantics.
    - Raises :class:`UnknownProviderError` with precise, actionable messages
      for unknown providers, import failures, missing classes, and constructor
      errors.
    """

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "gateway_providers.openai.client", "class": "OpenAIProvider"},
        "anthropic": {"module": "gateway_providers.anthropic.client", "class": "AnthropicProvider"},
    }

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        params: Optional[AdapterParams] = None,
        **kwargs: Any,
    ) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name (e.g., ``"openai"``).
        params:
            Optional structured :class:`AdapterParams`; merged with ``kwargs``,
            explicit kwargs taking precedence.
        **kwargs:
            Adapter-specific constructor kwargs (optional).

        Raises
        ------
        UnknownProviderError
            If provider is unknown, the adapter module fails to import, the
            adapter class is missing, or the adapter constructor raises.
        """
        merged_kwargs = cls._coerce_params(params, kwargs)

        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = spec["module"], spec["class"]

        try:
            mod = import_module(module_path)
        except Exception as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**merged_kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc
        except Exception as exc:  # pragma: no cover - adapter runtime init error
            raise UnknownProviderError(
                f"Failed to initialize provider '{provider}': {exc}"
            ) from exc

    @classmethod
    def create_many(cls, providers: Iterable[str]) -> List[Any]:
        """Create one adapter per name, preserving the given order."""
        return [cls.create(name) for name in providers]

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the tuple of supported canonical provider names (deterministic order)."""
        return tuple(cls._PROVIDERS.keys())

    @staticmethod
    def _coerce_params(params: Optional[AdapterParams], kwargs: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``AdapterParams`` into ``kwargs``.

        ``None`` fields of ``params`` are dropped so adapter defaults apply;
        values explicitly given in ``kwargs`` always win.
        """
        if params is None:
            return dict(kwargs)
        merged: Dict[str, Any] = dict(params.model_dump(exclude_none=True))
        merged.update(kwargs)
        return merged


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]

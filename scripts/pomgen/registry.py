"""Packaging provider lookup table.

Each packaging kind is a :class:`PackagingProvider` record keyed by its ID.
The ID is stamped into every generated POM as the
``pomgen.packaging.provider`` property, which is how
:func:`identify_provider` later works out which provider made a POM.
"""

from collections import OrderedDict
from pathlib import Path
from typing import Optional, Union

from .errors import ValidationError
from .models import DescriptorSummary, PackagingProvider
from .pom_document import parse_pom

# Name of the POM property that stores the packaging provider's ID.
PROVIDER_PROPERTY = "pomgen.packaging.provider"

DEFAULT_PROVIDER_ID = "jar"

BUILTIN_PROVIDERS = (
    PackagingProvider(
        id="jar",
        display_name="jar",
        template="jar-pom-template.xml",
        module_template="jar-module-pom-template.xml",
    ),
    PackagingProvider(
        id="war",
        display_name="war",
        template="war-pom-template.xml",
    ),
    PackagingProvider(
        id="pom",
        display_name="pom",
        template="pom-pom-template.xml",
    ),
)

_providers = OrderedDict((p.id, p) for p in BUILTIN_PROVIDERS)


def register_provider(provider: PackagingProvider, replace: bool = False) -> PackagingProvider:
    """Add a provider to the lookup table.

    Raises:
        ValidationError: If another provider already uses the same ID and
            ``replace`` is not set.
    """
    if provider.id in _providers and not replace:
        raise ValidationError(f"Packaging provider '{provider.id}' is already registered")
    _providers[provider.id] = provider
    return provider


def unregister_provider(provider_id: str) -> Optional[PackagingProvider]:
    return _providers.pop(provider_id, None)


def get_provider(provider_id: Optional[str] = None) -> PackagingProvider:
    """Look up a provider by ID (the default provider when ``None``).

    Raises:
        ValidationError: If no provider has that ID.
    """
    key = provider_id or DEFAULT_PROVIDER_ID
    try:
        return _providers[key]
    except KeyError:
        known = ", ".join(_providers)
        raise ValidationError(f"Unknown packaging provider '{key}' (known: {known})") from None


def list_providers() -> list[PackagingProvider]:
    return list(_providers.values())


def identify_provider(pom: Union[Path, str, DescriptorSummary]) -> Optional[PackagingProvider]:
    """Return the provider that generated a POM, or ``None`` if unknown.

    Args:
        pom: Path to a ``pom.xml``, its XML text, or an already parsed summary.
    """
    summary = pom if isinstance(pom, DescriptorSummary) else parse_pom(pom)
    provider_id = summary.properties.get(PROVIDER_PROPERTY)
    if not provider_id:
        return None
    return _providers.get(provider_id)

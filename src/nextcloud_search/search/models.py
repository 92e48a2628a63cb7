from dataclasses import dataclass


@dataclass(frozen=True)
class SearchProvider:
    id: str
    name: str


@dataclass(frozen=True)
class SearchProviders:
    """Unified search providers as listed by the server, plus the list's ETag."""

    e_tag: str
    providers: tuple[SearchProvider, ...]

    def find(self, name: str) -> SearchProvider | None:
        for provider in self.providers:
            if provider.name == name:
                return provider
        return None

    def names(self) -> list[str]:
        return [p.name for p in self.providers]

"""Key layout for presence sets in a shared store."""

from pydantic import BaseModel, ConfigDict

DEFAULT_PREFIX = "webrtc"


class PresenceKeys(BaseModel):
    """Names of the two presence sets for one deployment namespace.

    Multiple deployments can share one store instance by choosing distinct prefixes.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str
    peers: str
    broadcasting: str

    @classmethod
    def from_prefix(cls, prefix: str | None = None) -> "PresenceKeys":
        """Build the key layout for a namespace prefix.

        Surrounding whitespace and one trailing ":" are stripped. An empty result
        falls back to DEFAULT_PREFIX.

        Args:
            prefix: Optional namespace prefix, e.g. "webrtc" or "staging:".

        Returns:
            PresenceKeys with "<prefix>:peers" and "<prefix>:broadcasting".
        """
        namespace = (prefix or "").strip().removesuffix(":")
        if not namespace:
            namespace = DEFAULT_PREFIX
        return cls(
            namespace=namespace,
            peers=f"{namespace}:peers",
            broadcasting=f"{namespace}:broadcasting",
        )

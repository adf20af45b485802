"""Transform configuration.

Provides PrintOptions (the formatting bag handed to the printer unchanged)
and TransformConfig, the frozen settings for one pipeline run.
"""

from dataclasses import dataclass, field

DEFAULT_WRAPPER_NAMESPACE = "Scrivito"
DEFAULT_WRAPPER_METHOD = "connect"
DEFAULT_PRETTIER_COMMAND = ("prettier",)


@dataclass(frozen=True)
class PrintOptions:
    """Options for rendering rebuilt statements.

    Untouched statements are reprinted verbatim and ignore these.
    """

    semicolons: bool = True
    object_curly_spacing: bool = True


@dataclass(frozen=True)
class TransformConfig:
    """Configuration for one transform run.

    Frozen dataclass for immutable configuration. Defaults recognize
    ``export default Scrivito.connect(X)`` and pipe the result through
    prettier when it is installed. For a different wrapper, use:
        TransformConfig(wrapper_namespace="React", wrapper_method="memo")
    """

    wrapper_namespace: str = DEFAULT_WRAPPER_NAMESPACE
    wrapper_method: str = DEFAULT_WRAPPER_METHOD
    print_options: PrintOptions = field(default_factory=PrintOptions)
    format_output: bool = True
    prettier_command: tuple[str, ...] = DEFAULT_PRETTIER_COMMAND

    @property
    def wrapper(self) -> str:
        """Dotted wrapper name, e.g. "Scrivito.connect"."""
        return f"{self.wrapper_namespace}.{self.wrapper_method}"


def parse_wrapper(value: str) -> tuple[str, str]:
    """Split a dotted "Namespace.method" string.

    Raises:
        ValueError: If the value is not exactly two non-empty dotted parts
    """
    parts = value.strip().split(".")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Wrapper must look like 'Namespace.method': {value!r}")
    return parts[0], parts[1]

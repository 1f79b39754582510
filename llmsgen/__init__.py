"""Generate llms.txt indexes and plain Markdown copies from MD/MDX content trees."""

from .config import ConfigError, GeneratorConfig, load_config
from .orchestrator import Orchestrator

__version__ = "0.1.0"

__all__ = ["ConfigError", "GeneratorConfig", "Orchestrator", "load_config", "__version__"]

from .loader import CONFIG_FILENAME, load_harness_config
from .models import HarnessConfig

__all__ = ["CONFIG_FILENAME", "HarnessConfig", "load_harness_config"]

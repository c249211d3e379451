from .config import FormConfig
from .constants import VERSION
from .form import Form

__version__ = VERSION

__all__ = ["Form", "FormConfig", "__version__"]

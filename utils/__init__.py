from .env import load_project_dotenv  # noqa: F401
from .errors import InvalidArgumentError, PlanningError  # noqa: F401
from .logger import get_logger  # noqa: F401

from .domain.errors import ToolInvocationFailed, ToolNotFoundError
from .domain.schemas import InvocationError, ToolResult
from .services.invocation_service import InvocationService
from .services.router import ServerInfo, ToolRouter
from .tools.registry import ToolDefinition, ToolRegistry

__version__ = "1.0.0"

# Role: Process-wide singletons shared by the routers. One FlowController serves every session;
# per-session data lives in the StateManager.

from backend.core.flow_controller import FlowController
from backend.core.state_manager import StateManager

flow_controller = FlowController()
state_manager = StateManager()

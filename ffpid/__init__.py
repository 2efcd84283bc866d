from ffpid.core.config import PIDConfig
from ffpid.core.history import SignalHistory
from ffpid.core.pid_controller import PIDController, clamp
from ffpid.feedback.pid import ClassicPID

__all__ = ["PIDConfig", "SignalHistory", "PIDController", "ClassicPID", "clamp"]
__version__ = "0.1.0"

from .bus import Bus as Bus
from .computation import Computation as Computation
from .computation import computation_of as computation_of
from .delegate import delegate as delegate
from .drain import drain as drain
from .drain import take as take
from .exceptions import Cancelled as Cancelled
from .exceptions import ComputationError as ComputationError
from .exceptions import InvalidOperation as InvalidOperation
from .exceptions import ProtocolMisuseWarning as ProtocolMisuseWarning
from .generator import generator as generator
from .status import Status as Status
from .step import Step as Step

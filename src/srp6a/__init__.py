
from .srp import SRP, DefaultConfiguration
from .data import SRPData
from .configuration import SRPConfiguration
from .errors import SRPError, InvalidConfiguration
SRP, DefaultConfiguration, SRPData, SRPConfiguration # hush pyflakes
SRPError, InvalidConfiguration

__version__ = "0.1.0"

import hashlib
from ..configuration import SRPConfiguration
from ..groups import G2048
# Config2048 is roughly as secure as a 112-bit symmetric key.
Config2048 = SRPConfiguration(G2048, digest=hashlib.sha256)

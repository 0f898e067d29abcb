import hashlib
from ..configuration import SRPConfiguration
from ..groups import G3072
# Config3072 has 128-bit security.
Config3072 = SRPConfiguration(G3072, digest=hashlib.sha256)

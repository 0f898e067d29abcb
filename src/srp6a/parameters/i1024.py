import hashlib
from ..configuration import SRPConfiguration
from ..groups import G1024
# Config1024 uses SHA-1 with the RFC 5054 1024-bit group: this is the
# combination the published test vectors use. Avoid it for new deployments.
Config1024 = SRPConfiguration(G1024, digest=hashlib.sha1)

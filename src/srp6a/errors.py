
class SRPError(Exception):
    pass
class InvalidConfiguration(SRPError):
    """The group configuration (N, g, digest, HMAC) is missing a value or
    is not internally consistent."""
class InvalidSalt(SRPError):
    pass
class InvalidUserName(SRPError):
    pass
class InvalidPassword(SRPError):
    pass
class InvalidVerifier(SRPError):
    pass
class InvalidClientPublicValue(SRPError):
    """A is missing, or A % N == 0. A peer sending A=0 (or any multiple of
    N) would force the server's secret to zero."""
class InvalidServerPublicValue(SRPError):
    """B is missing, or B % N == 0. A peer sending such a B would force the
    client's secret to zero."""
class InvalidClientPrivateValue(SRPError):
    pass
class InvalidServerPrivateValue(SRPError):
    pass
class InvalidPasswordHash(SRPError):
    pass
class InvalidClientSharedSecret(SRPError):
    pass
class InvalidServerSharedSecret(SRPError):
    pass
class InvalidClientEvidenceMessage(SRPError):
    """The client evidence message is missing, or it does not match the one
    we computed. Both cases raise this class. Do not tell the peer which
    one happened."""
class InvalidServerEvidenceMessage(SRPError):
    """The server evidence message is missing, or it does not match the one
    we computed."""

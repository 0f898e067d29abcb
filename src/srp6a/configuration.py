import os, hashlib, logging
from hkdf import hkdf_extract
from .arithmetic import IntegerArithmetic
from .errors import InvalidConfiguration
from .groups import SRPGroup
from .util import bytes_to_number, unbiased_randrange

logger = logging.getLogger(__name__)

# groups smaller than this are rejected outright. RFC 5054 starts at 1024
# bits, and nothing smaller than 256 bits is an SRP group at all.
MIN_MODULUS_BITS = 256
# SHA-1 is the shortest digest any SRP profile uses
MIN_DIGEST_BYTES = 20

class SRPConfiguration:
    """Everything both sides must agree on before a handshake: the group
    (N, g), the hash function, and the keyed hash used for key derivation.
    It also knows how to draw the private ephemeral values a and b.

    'digest' is a hashlib-style constructor (hashlib.sha256, not a hash
    object). 'entropy_f' is expected to behave like os.urandom; the only
    reason to replace it is for deterministic unit tests. 'a_private' and
    'b_private', when given, are zero-argument callables returning the
    private value as big-endian bytes; they take precedence over
    entropy_f and exist so published test vectors can be reproduced.
    """

    def __init__(self, group, digest=hashlib.sha256, hmac_f=None,
                 entropy_f=os.urandom, a_private=None, b_private=None,
                 arithmetic=None):
        assert isinstance(group, SRPGroup), repr(group)
        self.group = group
        self.digest = digest
        self.hmac_f = hmac_f
        self.entropy_f = entropy_f
        self.a_private = a_private
        self.b_private = b_private
        if arithmetic is None:
            arithmetic = IntegerArithmetic()
        self.arithmetic = arithmetic

    @property
    def uint_N(self):
        return self.group.N

    @property
    def uint_g(self):
        return self.group.g

    def hash(self, data):
        return self.digest(data).digest()

    def hmac(self, key, message):
        if self.hmac_f is not None:
            return self.hmac_f(key, message)
        # HKDF-Extract(salt, IKM) is HMAC-Hash(salt, IKM)
        return hkdf_extract(key, message, hash=self.digest)

    def uint_a(self):
        return self._private_value(self.a_private)

    def uint_b(self):
        return self._private_value(self.b_private)

    def _private_value(self, fixed_f):
        if fixed_f is not None:
            return bytes_to_number(fixed_f())
        return unbiased_randrange(1, self.group.N, self.entropy_f)

    def validate(self):
        N = self.group.N
        g = self.group.g
        if not N or not g:
            raise self._invalid("N and g must both be set")
        if N % 2 == 0:
            raise self._invalid("N must be an odd prime")
        if N.bit_length() < MIN_MODULUS_BITS:
            raise self._invalid("N must be at least %d bits, not %d"
                                % (MIN_MODULUS_BITS, N.bit_length()))
        if not 2 <= g < N:
            raise self._invalid("g must be in [2, N-1]")
        if self.digest is None:
            raise self._invalid("digest must be set")
        try:
            h = self.hash(b"test")
        except Exception as e:
            raise self._invalid("digest failed: %r" % (e,)) from e
        if not isinstance(h, bytes) or len(h) < MIN_DIGEST_BYTES:
            raise self._invalid("digest must produce at least %d bytes"
                                % MIN_DIGEST_BYTES)
        try:
            mac = self.hmac(b"key", b"test")
        except Exception as e:
            raise self._invalid("hmac failed: %r" % (e,)) from e
        if not isinstance(mac, bytes):
            raise self._invalid("hmac must produce bytes")

    def _invalid(self, why):
        logger.debug("configuration rejected: %s", why)
        return InvalidConfiguration(why)

    def __repr__(self):
        return "<SRPConfiguration %r digest=%s arithmetic=%s>" % (
            self.group, getattr(self.digest, "__name__", self.digest),
            getattr(self.arithmetic, "name", self.arithmetic))

import hmac, logging
from .configuration import SRPConfiguration
from .data import SRPData
from .errors import (InvalidSalt, InvalidUserName, InvalidPassword,
                     InvalidVerifier, InvalidClientPublicValue,
                     InvalidServerPublicValue, InvalidClientPrivateValue,
                     InvalidServerPrivateValue, InvalidPasswordHash,
                     InvalidClientSharedSecret, InvalidServerSharedSecret,
                     InvalidClientEvidenceMessage,
                     InvalidServerEvidenceMessage)
from .parameters.i2048 import Config2048
from .util import (bytes_to_number, number_to_bytes, number_to_padded_bytes,
                   hash_padded)

DefaultConfiguration = Config2048

logger = logging.getLogger(__name__)

# N, g: group parameters
# H: the configured hash. H_pad(...) pads every operand to the width of N
# I, p, s: identity, password, salt
#
# x = H(s | H(I | ":" | p))
# v = g^x
# k = H_pad(N, g)
#
# client: a = random, A = g^a
#  server: b = random, B = kv + g^b
# u = H_pad(A, B)
# client: S = (B - kg^x)^(a + ux)
#  server: S = (Av^u)^b
# client: M1 = H_pad(A, B, S)
#  server: M2 = H_pad(A, M1, S)
# key = H(pad(S))  or  HMAC(salt, S)
#
# The evidence messages are the BouncyCastle ones, not the M = H(H(N) xor
# H(g), H(I), s, A, B, K) of the SRP paper.


def _require_bytes(name, value):
    if not isinstance(value, bytes):
        raise TypeError("%s must be bytes, not %s" % (name, type(value)))


class SRP:
    """The SRP-6a protocol engine.

    An SRP instance holds nothing but its configuration: every method takes
    an SRPData and returns a new SRPData (or bytes), so one engine may be
    shared between threads and handshakes. The handshake state lives in
    the SRPData, and the calling application is responsible for running
    the steps in this order:

    1. registration, client side, once per password:
         verifier(salt, I, p)  -> send .verifier and salt to the server
    2. client: generate_client_credentials(salt, I, p)  -> send A
       server: generate_server_credentials(v)           -> send B
    3. client: calculate_client_secret(data with B set)
       server: calculate_server_secret(data with A set)
    4. client: client_evidence_message(data)            -> send M1
       server: verify_client_evidence_message(data with M1 set)
       server: server_evidence_message(data)            -> send M2
       client: verify_server_evidence_message(data with M2 set)
    5. both:   calculate_client_shared_key / calculate_server_shared_key

    The evidence steps compute a missing shared secret on demand, but the
    steps are not interchangeable. Any failure raises a subclass of
    SRPError and the handshake should be abandoned.
    """

    def __init__(self, configuration=DefaultConfiguration):
        assert isinstance(configuration, SRPConfiguration), repr(configuration)
        self.configuration = configuration

    def _hash_padded(self, *values):
        c = self.configuration
        return hash_padded(c.digest, c.uint_N, *values)

    def _evidence_matches(self, expected, received):
        # constant-time over the padded encodings
        N = self.configuration.uint_N
        return hmac.compare_digest(number_to_padded_bytes(expected, N),
                                   number_to_padded_bytes(received, N))

    def _check_public_values(self, data):
        N = self.configuration.uint_N
        if data.A % N == 0:
            raise InvalidClientPublicValue("A % N must not be zero")
        if data.B % N == 0:
            raise InvalidServerPublicValue("B % N must not be zero")

    def password_hash(self, salt, identity, password):
        """x = H(s | H(I | ":" | p)) mod N"""
        c = self.configuration
        identity_hash = c.hash(b"".join([identity, b":", password]))
        return bytes_to_number(c.hash(salt + identity_hash)) % c.uint_N

    def generate_client_credentials(self, salt, identity, password):
        """Return SRPData with x, a and A set. Send A to the server."""
        c = self.configuration
        c.validate()
        _require_bytes("salt", salt)
        _require_bytes("identity", identity)
        _require_bytes("password", password)
        if not salt:
            raise InvalidSalt("salt must not be empty")
        if not identity:
            raise InvalidUserName("identity must not be empty")
        if not password:
            raise InvalidPassword("password must not be empty")

        x = self.password_hash(salt, identity, password)
        a = c.uint_a()
        A = c.arithmetic.powmod(c.uint_g, a, c.uint_N)
        logger.debug("client credentials generated (A: %d bytes)",
                     len(number_to_bytes(A)))
        return SRPData.client(x=x, a=a, A=A)

    def generate_server_credentials(self, verifier):
        """Return SRPData with v, k, b and B set, from the verifier the
        client registered. Send B to the client."""
        _require_bytes("verifier", verifier)
        if not verifier:
            raise InvalidVerifier("verifier must not be empty")
        c = self.configuration
        c.validate()
        N, g = c.uint_N, c.uint_g
        arith = c.arithmetic

        v = bytes_to_number(verifier)
        k = self._hash_padded(N, g)
        b = c.uint_b()
        B = (arith.mulmod(k, v, N) + arith.powmod(g, b, N)) % N
        logger.debug("server credentials generated (B: %d bytes)",
                     len(number_to_bytes(B)))
        return SRPData.server(v=v, k=k, b=b, B=B)

    def verifier(self, salt, identity, password):
        """Return the client credentials plus the verifier v = g^x. The
        verifier (data.verifier) and the salt are what the server stores;
        the password never leaves the client."""
        data = self.generate_client_credentials(salt, identity, password)
        c = self.configuration
        v = c.arithmetic.powmod(c.uint_g, data.x, c.uint_N)
        return data.replace(v=v)

    def calculate_client_secret(self, data):
        """S = (B - kg^x) ^ (a + ux). Needs A, B (from the server), a, x.
        Returns a copy of data with u, k and clientS set."""
        c = self.configuration
        c.validate()
        N, g = c.uint_N, c.uint_g
        arith = c.arithmetic
        self._check_public_values(data)
        if data.a <= 0:
            raise InvalidClientPrivateValue("a must be set")
        if data.x <= 0:
            raise InvalidPasswordHash("x must be set")

        u = self._hash_padded(data.A, data.B)
        k = self._hash_padded(N, g)
        exp = (u * data.x) + data.a
        tmp = arith.mulmod(arith.powmod(g, data.x, N), k, N)
        # add N so the base never goes negative before reduction
        S = arith.powmod((data.B + N - tmp) % N, exp, N)
        logger.debug("client secret calculated")
        return data.replace(u=u, k=k, clientS=S)

    def calculate_server_secret(self, data):
        """S = (Av^u) ^ b. Needs A (from the client), B, b, v. Returns a
        copy of data with u and serverS set."""
        c = self.configuration
        c.validate()
        N = c.uint_N
        arith = c.arithmetic
        self._check_public_values(data)
        if data.b <= 0:
            raise InvalidServerPrivateValue("b must be set")
        if data.v <= 0:
            raise InvalidVerifier("v must be set")

        u = self._hash_padded(data.A, data.B)
        base = arith.mulmod(data.A, arith.powmod(data.v, u, N), N)
        S = arith.powmod(base, data.b, N)
        logger.debug("server secret calculated")
        return data.replace(u=u, serverS=S)

    def client_evidence_message(self, data):
        """M1 = H_pad(A, B, clientS), computing clientS first if needed."""
        c = self.configuration
        c.validate()
        self._check_public_values(data)
        if data.clientS == 0:
            data = self.calculate_client_secret(data)
        M = self._hash_padded(data.A, data.B, data.clientS)
        return data.replace(clientM=M)

    def server_evidence_message(self, data):
        """M2 = H_pad(A, M1, serverS), computing serverS first if needed."""
        c = self.configuration
        c.validate()
        self._check_public_values(data)
        if data.serverS == 0:
            data = self.calculate_server_secret(data)
        M = self._hash_padded(data.A, data.clientM, data.serverS)
        return data.replace(serverM=M)

    def verify_client_evidence_message(self, data):
        """Check the M1 received from the client against our serverS.
        Returns None, or raises InvalidClientEvidenceMessage."""
        c = self.configuration
        c.validate()
        if data.clientM <= 0:
            raise InvalidClientEvidenceMessage("M1 must be set")
        self._check_public_values(data)
        if data.serverS <= 0:
            raise InvalidServerSharedSecret("server S must be set")
        M = self._hash_padded(data.A, data.B, data.serverS)
        if not self._evidence_matches(M, data.clientM):
            logger.debug("client evidence message mismatch")
            raise InvalidClientEvidenceMessage("M1 does not match")

    def verify_server_evidence_message(self, data):
        """Check the M2 received from the server against our clientS.
        Returns None, or raises InvalidServerEvidenceMessage."""
        c = self.configuration
        c.validate()
        if data.serverM <= 0:
            raise InvalidServerEvidenceMessage("M2 must be set")
        if data.clientM <= 0:
            raise InvalidClientEvidenceMessage("M1 must be set")
        if data.A % c.uint_N == 0:
            raise InvalidClientPublicValue("A % N must not be zero")
        if data.clientS <= 0:
            raise InvalidClientSharedSecret("client S must be set")
        M = self._hash_padded(data.A, data.clientM, data.clientS)
        if not self._evidence_matches(M, data.serverM):
            logger.debug("server evidence message mismatch")
            raise InvalidServerEvidenceMessage("M2 does not match")

    def _shared_key(self, S, salt):
        c = self.configuration
        if salt is None:
            return c.hash(number_to_padded_bytes(S, c.uint_N))
        _require_bytes("salt", salt)
        # with a salt, derive HMAC(salt, S): different salts give
        # independent keys from the same secret
        return c.hmac(salt, number_to_bytes(S))

    def calculate_client_shared_key(self, data, salt=None):
        """H(pad(clientS)), or HMAC(salt, clientS) when a salt is given."""
        self.configuration.validate()
        if data.clientS <= 0:
            raise InvalidClientSharedSecret("client S must be set")
        return self._shared_key(data.clientS, salt)

    def calculate_server_shared_key(self, data, salt=None):
        """H(pad(serverS)), or HMAC(salt, serverS) when a salt is given."""
        self.configuration.validate()
        if data.serverS <= 0:
            raise InvalidServerSharedSecret("server S must be set")
        return self._shared_key(data.serverS, salt)

import unittest
import hashlib, hmac
from binascii import hexlify, unhexlify
from srp6a.configuration import SRPConfiguration
from srp6a.groups import G1024
from srp6a.srp import SRP
from .common import PRG

def h2b(s):
    return unhexlify("".join(s.split()))

def h2n(s):
    return int("".join(s.split()), 16)

class TestPRG(unittest.TestCase):
    def test_basic(self):
        PRGA = PRG(b"A")
        dataA = PRGA(16)
        self.assertEqual(hexlify(dataA), b"c1d59d78903e9d7874d9064e12d36c58")
        PRGB = PRG(b"B")
        dataB = PRGB(16)
        self.assertEqual(hexlify(dataB), b"2af6d4b843a9e6cd1d185eb5de870f77")

# RFC 5054 appendix B: SHA-1, the 1024-bit group
I = b"alice"
P = b"password123"
s = h2b("BEB25379 D1A8581E B5A72767 3A2441EE")

k = h2n("7556AA04 5AEF2CDD 07ABAF0F 665C3E81 8913186F")
x = h2n("94B7555A ABE9127C C58CCF49 93DB6CF8 4D16C124")
v = h2n("""
7E273DE8 696FFC4F 4E337D05 B4B375BE B0DDE156 9E8FA00A 9886D812
9BADA1F1 822223CA 1A605B53 0E379BA4 729FDC59 F105B478 7E5186F5
C671085A 1447B52A 48CF1970 B4FB6F84 00BBF4CE BFBB1681 52E08AB5
EA53D15C 1AFF87B2 B9DA6E04 E058AD51 CC72BFC9 033B564E 26480D78
E955A5E2 9E7AB245 DB2BE315 E2099AFB""")
a = h2b("""
60975527 035CF2AD 1989806F 0407210B C81EDC04 E2762A56 AFD529DD DA2D4393""")
b = h2b("""
E487CB59 D31AC550 471E81F0 0F6928E0 1DDA08E9 74A004F4 9E61F5D1 05284D20""")
A = h2n("""
61D5E490 F6F1B795 47B0704C 436F523D D0E560F0 C64115BB 72557EC4
4352E890 3211C046 92272D8B 2D1A5358 A2CF1B6E 0BFCF99F 921530EC
8E393561 79EAE45E 42BA92AE ACED8251 71E1E8B9 AF6D9C03 E1327F44
BE087EF0 6530E69F 66615261 EEF54073 CA11CF58 58F0EDFD FE15EFEA
B349EF5D 76988A36 72FAC47B 0769447B""")
B = h2n("""
BD0C6151 2C692C0C B6D041FA 01BB152D 4916A1E7 7AF46AE1 05393011
BAF38964 DC46A067 0DD125B9 5A981652 236F99D9 B681CBF8 7837EC99
6C6DA044 53728610 D0C6DDB5 8B318885 D7D82C7F 8DEB75CE 7BD4FBAA
37089E6F 9C6059F3 88838E7A 00030B33 1EB76840 910440B1 B27AAEAE
EB4012B7 D7665238 A8E3FB00 4B117B58""")
u = h2n("CE38B959 3487DA98 554ED47D 70A7AE5F 462EF019")
S = h2n("""
B0DC82BA BCF30674 AE450C02 87745E79 90A3381F 63B387AA F271A10D
233861E3 59B48220 F7C4693C 9AE12B0A 6F67809F 0876E2D0 13800D6C
41BB59B6 D5979B5C 00A172B4 A2A5903A 0BDCAF8A 709585EB 2AFAFA8F
3499B200 210DCC1F 10EB3394 3CD67FC8 8A2F39A4 BE5BEC4E C0A3212D
C346D7E4 74B29EDE 8A469FFE CA686E5A""")

def _should_be_unused(count): raise NotImplementedError

def rfc5054_srp():
    c = SRPConfiguration(G1024, digest=hashlib.sha1,
                         entropy_f=_should_be_unused,
                         a_private=lambda: a, b_private=lambda: b)
    return SRP(c)

def H_pad(*values):
    # an independent rendition of the padded hash, straight from hashlib
    data = b"".join([n.to_bytes(128, "big") for n in values])
    return int.from_bytes(hashlib.sha1(data).digest(), "big") % G1024.N

class RFC5054(unittest.TestCase):
    """Make sure we know when an incompatible change has landed"""

    def setUp(self):
        self.srp = rfc5054_srp()

    def test_password_hash(self):
        self.assertEqual(self.srp.password_hash(s, I, P), x)

    def test_verifier(self):
        d = self.srp.verifier(s, I, P)
        self.assertEqual(d.x, x)
        self.assertEqual(d.v, v)
        self.assertEqual(d.A, A)

    def test_client(self):
        d = self.srp.generate_client_credentials(s, I, P)
        self.assertEqual(d.x, x)
        self.assertEqual(d.a, int(hexlify(a), 16))
        self.assertEqual(d.A, A)
        d.server_public_value = B.to_bytes(128, "big")
        d = self.srp.calculate_client_secret(d)
        self.assertEqual(d.k, k)
        self.assertEqual(d.u, u)
        self.assertEqual(d.clientS, S)

    def test_server(self):
        d = self.srp.generate_server_credentials(v.to_bytes(128, "big"))
        self.assertEqual(d.v, v)
        self.assertEqual(d.k, k)
        self.assertEqual(d.B, B)
        d.client_public_value = A.to_bytes(128, "big")
        d = self.srp.calculate_server_secret(d)
        self.assertEqual(d.u, u)
        self.assertEqual(d.serverS, S)

    def test_evidence_and_keys(self):
        c = self.srp.generate_client_credentials(s, I, P).replace(B=B)
        c = self.srp.client_evidence_message(c)
        M1 = H_pad(A, B, S)
        self.assertEqual(c.clientM, M1)

        d = self.srp.generate_server_credentials(v.to_bytes(128, "big"))
        d = self.srp.server_evidence_message(d.replace(A=A, clientM=M1))
        M2 = H_pad(A, M1, S)
        self.assertEqual(d.serverM, M2)
        self.srp.verify_client_evidence_message(d)
        self.srp.verify_server_evidence_message(c.replace(serverM=M2))

        key = hashlib.sha1(S.to_bytes(128, "big")).digest()
        self.assertEqual(self.srp.calculate_client_shared_key(c), key)
        self.assertEqual(self.srp.calculate_server_shared_key(d), key)

        S_bytes = S.to_bytes(128, "big") # S has no leading zero byte
        salted = hmac.new(b"session", S_bytes, hashlib.sha1).digest()
        self.assertEqual(self.srp.calculate_client_shared_key(c, b"session"),
                         salted)
        self.assertEqual(self.srp.calculate_server_shared_key(d, b"session"),
                         salted)

if __name__ == '__main__':
    unittest.main()

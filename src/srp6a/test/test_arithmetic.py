import unittest
import importlib.util
from srp6a.arithmetic import IntegerArithmetic, GmpyArithmetic
from srp6a.configuration import SRPConfiguration
from srp6a.groups import G1024
from srp6a.srp import SRP
from .common import PRG

HAVE_GMPY2 = importlib.util.find_spec("gmpy2") is not None

class Integer(unittest.TestCase):
    arith_class = IntegerArithmetic

    def setUp(self):
        self.arith = self.arith_class()

    def test_powmod(self):
        N = G1024.N
        self.assertEqual(self.arith.powmod(2, 10, 1000), 24)
        self.assertEqual(self.arith.powmod(G1024.g, N - 1, N), 1)
        self.assertEqual(self.arith.powmod(5, 0, N), 1)
        self.assertIs(type(self.arith.powmod(3, 5, 7)), int)

    def test_mulmod(self):
        self.assertEqual(self.arith.mulmod(7, 8, 10), 6)
        big = G1024.N - 1
        self.assertEqual(self.arith.mulmod(big, big, G1024.N), 1)
        self.assertIs(type(self.arith.mulmod(3, 5, 7)), int)

@unittest.skipUnless(HAVE_GMPY2, "gmpy2 is not installed")
class Gmpy(Integer):
    arith_class = GmpyArithmetic

    def test_interop(self):
        # a gmpy2 client talks to a pure-python server
        def config(seed, arith):
            return SRPConfiguration(G1024, entropy_f=PRG(seed),
                                    arithmetic=arith)
        client = SRP(config(b"c", GmpyArithmetic()))
        server = SRP(config(b"s", IntegerArithmetic()))
        salt, I, pw = b"salt", b"alice", b"password"
        v = client.verifier(salt, I, pw).verifier
        cdata = client.generate_client_credentials(salt, I, pw)
        sdata = server.generate_server_credentials(v)
        cdata = client.calculate_client_secret(cdata.replace(B=sdata.B))
        sdata = server.calculate_server_secret(sdata.replace(A=cdata.A))
        self.assertEqual(cdata.clientS, sdata.serverS)

        # and the same entropy gives the same numbers on either backend
        again = SRP(config(b"c", IntegerArithmetic()))
        again.verifier(salt, I, pw)
        self.assertEqual(again.generate_client_credentials(salt, I, pw).A,
                         cdata.A)

if __name__ == '__main__':
    unittest.main()

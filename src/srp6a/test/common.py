from hashlib import sha256
from itertools import count
from ..configuration import SRPConfiguration

class PRG:
    # this returns a callable which, when invoked with an integer N, will
    # return N pseudorandom bytes derived from the seed
    def __init__(self, seed):
        self.generator = self.block_generator(seed)

    def __call__(self, numbytes):
        return b"".join([next(self.generator) for i in range(numbytes)])

    def block_generator(self, seed):
        assert isinstance(seed, bytes)
        for counter in count():
            cseed = b"".join([b"prng-",
                              str(counter).encode("ascii"),
                              b"-",
                              seed])
            block = sha256(cseed).digest()
            for i in range(len(block)):
                yield block[i:i+1]

def deterministic(config, seed=b"seed"):
    # same group and hash, but a reproducible source of a and b
    return SRPConfiguration(config.group, digest=config.digest,
                            entropy_f=PRG(seed),
                            arithmetic=config.arithmetic)

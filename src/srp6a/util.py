import os, binascii, math

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num):
    """Minimal unsigned big-endian encoding. Zero encodes as one zero
    byte."""
    if num < 0:
        raise ValueError("cannot encode negative number %d" % num)
    s_hex = "%x" % num
    if len(s_hex) % 2:
        s_hex = "0" + s_hex
    s = binascii.unhexlify(s_hex.encode("ascii"))
    assert isinstance(s, bytes)
    return s

def bytes_to_number(s):
    if not isinstance(s, (bytes, bytearray)):
        raise TypeError
    if not s:
        return 0
    return int(binascii.hexlify(s), 16)

def pad(s, length):
    # left-pad with zeros. Anything already wide enough passes unchanged.
    if len(s) >= length:
        return s
    return b"\x00" * (length - len(s)) + s

def number_to_padded_bytes(num, maxval):
    return pad(number_to_bytes(num), size_bytes(maxval))

def hash_padded(digest, N, *values):
    """Hash the concatenation of 'values', each left-padded with zeros to
    the byte width of N, and return the digest reduced modulo N.

    Every SRP implementation that interoperates with ours pads the same
    way, so k=H(N,g), u=H(A,B) and the evidence messages all go through
    here. 'digest' is a hashlib-style constructor.
    """
    width = size_bytes(N)
    data = b"".join([pad(number_to_bytes(v), width) for v in values])
    return bytes_to_number(digest(data).digest()) % N

def generate_mask(maxval):
    num_bytes = size_bytes(maxval)
    num_bits = size_bits(maxval)
    leftover_bits = num_bits % 8
    if leftover_bits:
        top_byte_mask_int = (0x1 << leftover_bits) - 1
    else:
        top_byte_mask_int = 0xff
    assert 0 <= top_byte_mask_int <= 0xff
    return (top_byte_mask_int, num_bytes)

def random_list_of_ints(count, entropy_f=os.urandom):
    # return a list of ints, each 0<=x<=255, for masking
    return list(entropy_f(count))
def mask_list_of_ints(top_byte_mask_int, list_of_ints):
    return [top_byte_mask_int & list_of_ints[0]] + list_of_ints[1:]
def list_of_ints_to_number(l):
    s = "".join(["%02x" % b for b in l])
    return int(s, 16)

def unbiased_randrange(start, stop, entropy_f):
    """Return a random integer k such that start <= k < stop, uniformly
    distributed across that range, like random.randrange but
    cryptographically bound and unbiased.

    r(1,N) provides a random private exponent for an SRP group of modulus
    N.
    """

    # we generate a random binary string up to 7 bits larger than we really
    # need, mask that down to be the right number of bits, then compare
    # against the range and try again if it's wrong. This will take a random
    # number of tries, but on average less than two

    # first we get 0<=number<(stop-start)
    maxval = stop - start

    top_byte_mask_int, num_bytes = generate_mask(maxval)
    while True:
        enough_bytes = random_list_of_ints(num_bytes, entropy_f)
        assert len(enough_bytes) == num_bytes
        candidate_bytes = mask_list_of_ints(top_byte_mask_int, enough_bytes)
        candidate_int = list_of_ints_to_number(candidate_bytes)
        if candidate_int < maxval:
            return start + candidate_int

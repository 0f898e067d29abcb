from .util import bytes_to_number, number_to_bytes

# field name -> name of the bytes accessor used on the wire
FIELDS = [
    ("x", "password_hash"),
    ("a", "client_private_value"),
    ("A", "client_public_value"),
    ("v", "verifier"),
    ("k", "multiplier"),
    ("b", "server_private_value"),
    ("B", "server_public_value"),
    ("u", "scrambler"),
    ("clientS", "client_secret"),
    ("serverS", "server_secret"),
    ("clientM", "client_evidence_message"),
    ("serverM", "server_evidence_message"),
    ]
FIELD_NAMES = tuple(name for (name, _) in FIELDS)

# safe to show in repr()
PUBLIC_FIELDS = ("A", "B", "k", "u", "clientM", "serverM")


def _bytes_accessor(name, doc):
    def fget(self):
        return number_to_bytes(getattr(self, name))
    def fset(self, value):
        setattr(self, name, bytes_to_number(value))
    return property(fget, fset, doc=doc)


class SRPData:
    """All the numbers of one SRP handshake, as ints.

    Every field starts at 0, which means 'not set yet'. Fields are filled
    in progressively by the SRP engine, which never modifies the instance
    it is given: it returns a new one (see replace()). Values received from
    the peer are stored through the bytes accessors, e.g.

        data.server_public_value = B_bytes_from_server

    The bytes accessors use the minimal big-endian encoding. Padding to the
    width of N only happens when values are hashed.

    One instance belongs to one handshake. Do not share an instance
    between threads without locking; copy() it instead.
    """

    def __init__(self, **fields):
        for name in FIELD_NAMES:
            setattr(self, name, 0)
        for name, value in fields.items():
            if name not in FIELD_NAMES:
                raise TypeError("unknown SRPData field %r" % (name,))
            value = int(value)
            if value < 0:
                raise ValueError("SRPData field %s must not be negative"
                                 % (name,))
            setattr(self, name, value)

    @classmethod
    def client(klass, x, a, A):
        return klass(x=x, a=a, A=A)

    @classmethod
    def server(klass, v, k, b, B):
        return klass(v=v, k=k, b=b, B=B)

    def replace(self, **changes):
        d = self.as_dict()
        d.update(changes)
        return self.__class__(**d)

    def copy(self):
        return self.replace()

    def as_dict(self):
        return dict((name, getattr(self, name)) for name in FIELD_NAMES)

    password_hash = _bytes_accessor("x", "password hash x = H(s, H(I:p))")
    client_private_value = _bytes_accessor("a", "client private value a")
    client_public_value = _bytes_accessor("A", "client public value A = g^a")
    verifier = _bytes_accessor("v", "verifier v = g^x")
    multiplier = _bytes_accessor("k", "multiplier k = H(N, g)")
    server_private_value = _bytes_accessor("b", "server private value b")
    server_public_value = _bytes_accessor("B",
                                          "server public value B = kv + g^b")
    scrambler = _bytes_accessor("u", "scrambler u = H(A, B)")
    client_secret = _bytes_accessor("clientS",
                                    "client shared secret (B - kg^x)^(a + ux)")
    server_secret = _bytes_accessor("serverS",
                                    "server shared secret (Av^u)^b")
    client_evidence_message = _bytes_accessor("clientM",
                                              "client evidence H(A, B, S)")
    server_evidence_message = _bytes_accessor("serverM",
                                              "server evidence H(A, M, S)")

    def __eq__(self, other):
        if not isinstance(other, SRPData):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        shown = ["%s=%#x" % (name, getattr(self, name))
                 for name in PUBLIC_FIELDS if getattr(self, name)]
        hidden = [name for name in FIELD_NAMES
                  if name not in PUBLIC_FIELDS and getattr(self, name)]
        if hidden:
            shown.append("set=%s" % ",".join(hidden))
        return "<SRPData %s>" % " ".join(shown)

#!/usr/bin/env python

import timeit
from setuptools import setup, Command

cmdclass = {}

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(0, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for module, config in [("i1024", "Config1024"),
                               ("i2048", "Config2048"),
                               ("i3072", "Config3072")]:
            S1 = ("from srp6a import SRP; "
                  "from srp6a.parameters.%s import %s" % (module, config))
            S2 = "srp = SRP(%s)" % config
            S3 = "v = srp.verifier(b'salt', b'alice', b'password').verifier"
            S4 = "c = srp.generate_client_credentials(b'salt', b'alice', b'password')"
            S5 = "s = srp.generate_server_credentials(v)"
            S6 = "c = srp.calculate_client_secret(c.replace(B=s.B))"
            S7 = "s = srp.calculate_server_secret(s.replace(A=c.A))"

            client = do([S1, S2, S3, S5], ";".join([S4, S6]))
            server = do([S1, S2, S3, S4], ";".join([S5, S7]))
            print("%-10s: client=%6s, server=%6s"
                  % (config, abbrev(client), abbrev(server)))
cmdclass["speed"] = Speed

setup(name="srp6a",
      version="0.1.0",
      description="SRP-6a password-authenticated key exchange (pure python)",
      package_dir={"": "src"},
      packages=["srp6a", "srp6a.parameters", "srp6a.test"],
      license="MIT",
      cmdclass=cmdclass,
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      python_requires=">=3.6",
      install_requires=["hkdf"],
      extras_require={
          "gmpy": ["gmpy2"],
          "test": ["gmpy2"],
          },
      )

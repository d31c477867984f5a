from setuptools import setup, find_packages

# no import swizzle here, version is read from the installed metadata
version = (0, 1, 0)


install_requires = []

tests_require = ["pytest",
                 ]


setup(name="swizzle-dispatch",
      packages=find_packages(exclude=["tests", "tests.*"]),
      version="%d.%d.%d" % version,
      keywords=["monkeypatch", "swizzling", "dispatch"],
      description="replace implementations of operations on classes while keeping "
                  "a handle to the original",
      python_requires=">=3.8",
      zip_safe=False,
      install_requires=install_requires,
      extras_require=dict(test=tests_require),
      )

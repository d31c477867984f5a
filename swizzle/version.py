import importlib.metadata

# "swizzle" on the index is an unrelated project
distribution = "swizzle-dispatch"

try:
    version = importlib.metadata.version(distribution).split(".")
except importlib.metadata.PackageNotFoundError:
    version = ["0", "0", "0"]

if version[-1].startswith("post"):
    version[-1] = version[-1][4:]
for i, vi in enumerate(version):
    try:
        vi = int(vi)
    except ValueError:
        pass
    version[i] = vi

version = tuple(version)

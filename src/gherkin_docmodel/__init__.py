from importlib.metadata import version, PackageNotFoundError


try:
    __version__ = version('gherkin-docmodel')
except PackageNotFoundError:
    __version__ = 'unknown'

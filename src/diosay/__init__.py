"""diosay - You were expecting a cowsay clone, but it was me, DIO!"""

__version__ = "0.1.0"


# Submodules load on first call so `python -m diosay.cli` does not find
# them already in sys.modules.
def main(*args, **kwargs):
    from .cli import main as _m

    return _m(*args, **kwargs)


def resource_builder_main(*args, **kwargs):
    from .resource_builder import main as _m

    return _m(*args, **kwargs)


__all__ = [
    "main",
    "resource_builder_main",
]

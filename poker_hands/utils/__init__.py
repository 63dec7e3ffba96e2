from .seeding import resolve_seed, make_rng

__all__ = ["resolve_seed", "make_rng"]

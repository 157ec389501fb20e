"""
EconOPS package

Simulation core of a tick-driven resource economy game: workers gather raw
resources, resources pay for new workers, and a consumer market buys
stockpiles at prices that drift after every sale.  The package separates the
domain objects, the game engine and the static data catalogs into distinct
subpackages.
"""

__all__ = ["core", "domain", "data"]

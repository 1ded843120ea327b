"""Application layer.

Services and use cases orchestrating the domain: the slave-side response
synthesis and the master-side transaction loop.
"""

"""Domain layer.

This layer contains:
- Interfaces: contracts for transports, register stores and protocols
- Value Objects: function and exception codes
- Entities: the Register cell and transaction states
- Messages: requests and responses of the 0x17 exchange
- Strategies: write payload decoding

The domain layer has no dependencies outside the Python stdlib.
"""

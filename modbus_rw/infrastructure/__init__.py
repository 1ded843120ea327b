"""Infrastructure layer.

The infrastructure layer contains implementations of domain interfaces:
- Protocol implementations (0x17 wire codec, PDU protocol)
- Register store implementations (in-memory process image)
- Transport implementations (in-process loopback)
- Decorators for transport error translation

This layer depends on the domain layer, never the other way round.
"""

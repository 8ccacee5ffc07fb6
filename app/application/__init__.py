"""
Application layer package.

Contains use cases that orchestrate domain logic.
Use cases receive their ports through the constructor.
This layer depends on domain ports, never on infrastructure.
"""

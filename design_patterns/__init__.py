"""
Design Patterns Sampler

Six minimal object-oriented design pattern examples:
- Creational: Singleton, Prototype
- Structural: Adapter, Decorator
- Behavioral: State, Strategy
"""

__version__ = "0.1.0"

"""
Starfall - single-screen arcade shooter.

Modules:
- core: Abstract interfaces for games and output sinks
- games: Game implementations (shooter)
- visualization: Menu screens and UI components
- utils: Configuration loading
- app: pygame host application
"""

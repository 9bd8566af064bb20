"""Sample language profiles. Each module exposes ``build_profile(options)``."""

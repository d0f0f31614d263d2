"""
Configuration settings for the ray tracer
"""

# Rendering settings
RENDER_SETTINGS = {
    'samples': 1,        # rays per pixel; >1 enables jittered anti-aliasing
    'seed': None,        # seed for the jitter generator
    'max_dist': 20.0,    # rays that have travelled further return black
    'max_depth': 64,     # hard ceiling on reflection bounces
}

# Logging settings
LOGGING_SETTINGS = {
    'level': 'INFO',
    'format': '%(levelname)s %(name)s: %(message)s',
}

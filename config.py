"""
Configuration settings for the ray tracer
"""

# Rendering settings
RENDER_SETTINGS = {
    'width': 200,
    'height': 200,
    'workers': None,  # None uses os.cpu_count()
    'output_format': 'png',
    'output_dir': None,  # None writes to the system temp directory
}

# Viewport and scene settings
SCENE_SETTINGS = {
    'ray_origin': (0.0, 0.0, -5.0),
    'wall_z': 10.0,
    'wall_size': 7.0,
    'light_position': (-10.0, 10.0, -10.0),
    'light_intensity': (1.0, 1.0, 1.0),
    'sphere_color': (1.0, 0.2, 1.0),
    'silhouette_color': (1.0, 0.0, 0.0),
}

# Display settings
DISPLAY_SETTINGS = {
    'window_title': 'Ray Tracer - Live Preview',
    'target_fps': 30,
    'update_interval': 0.01,  # seconds between event loop polls
}

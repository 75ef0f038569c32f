from setuptools import setup, find_packages

setup(
    name="raytracer-challenge",
    version="1.0.0",
    description="Sphere ray tracer with Phong shading and threaded scanline rendering",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["camera", "config", "demos", "image_io", "main", "scene", "utils"],
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "opencv-python-headless>=4.5.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["raytracer=main:main"],
    },
    python_requires=">=3.8",
)

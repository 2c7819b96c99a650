from setuptools import setup, find_packages

setup(
    name="mediaprobe",
    version="0.1.0",
    description="Determine the video duration of media files with mediainfo",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich>=13.0.0",  # Explicit minimum version
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "mediaprobe=mediaprobe.__main__:main",
        ],
    },
    python_requires=">=3.8",
)

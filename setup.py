#!/usr/bin/env python3

from setuptools import setup
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="lathe",
        packages=[
            "lathe",
            "lathe.mesh",
            "lathe.colliders",
            "lathe.revolve",
        ],
        python_requires='>=3.10',
        version="0.1.0",
        license="MIT",
        description="Procedural solids of revolution: triangle mesh and convex collision hull",
        author="mirmik",
        author_email="mirmikns@yandex.ru",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["mesh", "geometry", "procedural", "convex hull"],
        classifiers=[],
        install_requires=[
            "numpy",
            "scipy>=1.10",
        ],
        extras_require={
            "test": ["pytest"],
        },
        zip_safe=False,
    )

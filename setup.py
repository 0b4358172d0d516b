#!/usr/bin/env python

import os
from setuptools import setup


def main():
    with open(os.path.join("pebblechain", "__init__.py")) as f:
        for line in f:
            if "__version__" in line.strip():
                version = line.split("=", 1)[1].strip().strip('"')
                break
        else:
            raise RuntimeError("version not found")

    setup(name='pebblechain',
          version=version,
          description='Hash chain generation with power-of-two pebble checkpoints.',
          packages=['pebblechain'],
          license="2-clause BSD",
          long_description="""Builds one-way hash chains from a seed and keeps only log2(L) pebbles, one per power-of-two position.""",
          python_requires=">=3.6",
          install_requires=[],
          extras_require={
                "test": ["pytest >= 3.0.0"],
                "dev": ["pytest >= 3.0.0", "paver >= 1.2.4"],
          },
          zip_safe=False,
    )

if __name__ == "__main__":
    main()

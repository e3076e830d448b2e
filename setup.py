from setuptools import setup

setup(
    name='tile-merge-2048',
    version='0.1.0',
    python_requires='>=3.10',
    install_requires=['jax'],
    extras_require={'tests': ['pytest']},
    packages=['tile_merge',
              'tile_merge.config',
              'tile_merge.env',
              'tile_merge.utils'],
)

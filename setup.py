from setuptools import setup, find_packages

setup(
    name='orientations',
    version='1.0.0',
    description='Interoperable 3D rotation representations: quaternions, rotation matrices, axis-angle, '
                'rotation vectors, and yaw-pitch-roll angles',
    packages=find_packages(include=['orientations', 'orientations.*']),
    python_requires='>=3.10',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
)

from setuptools import setup, find_packages

setup(
    name='GraphDrawing',
    version='0.1.0',
    description='Draws y = cos^3(t^2) / (1.5t + 2) as a line or scatter graph in a declarative PyQt window.',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    package_data={'GraphDrawing': ['*.yaml']},
    python_requires='>=3.7',
    install_requires=[
        'numpy >= 1.15.0',
        'PyQt5 >= 5.14.1',
        'matplotlib >= 3.5.2',
        'PyYAML >= 5.3.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['graph-drawing = GraphDrawing.view_graph:main'],
    },
)

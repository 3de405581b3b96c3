"""Setup module"""

from setuptools import setup

setup(
    name='fsmbuilder',
    version='0.0.1',
    description="Library to build deterministic finite automata (DFA) "
    "from their 5-tuple description, validate them, and run them on "
    "input strings",
    install_requires=['numpy'],
    extras_require={
        "DebugGraphViewer": [
            "matplotlib",
            "networkx",
            "scipy",
            "PyQt5"],
        "test": ["pytest"]
    },
    python_requires='>=3.12',
    license='None',
    package_dir={'': 'src'},
    packages=['fsmbuilder'],
    author='Callum Hynes',
    keywords=['finite state machine', 'DFA', 'automaton'])

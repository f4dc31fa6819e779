from setuptools import find_packages, setup

setup(
    name='hexb64',
    description='Convert between hex and base64 text from the command line',
    license='MIT',
    package_dir={'':'src'},
    packages=find_packages('src'),
    version='0.1.0',
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    install_requires=[
        'Click>=8.0',
        'rich',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'hexb64 = hexb64.main:main',
            'b64hex = hexb64.main:main',
        ],
    },
)

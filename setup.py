from setuptools import setup

trove_classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: Implementation :: CPython",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
    ]

setup(name="keyphrase",
      version="0.1.0",
      description="Convert cryptographic keys to memorable passphrases and back",
      long_description=open('README.md').read(),
      long_description_content_type='text/markdown',
      license="MIT",
      classifiers=trove_classifiers,
      python_requires=">=3.10",

      package_dir={"": "src"},
      packages=["keyphrase",
                "keyphrase.cli",
                "keyphrase.test",
                ],
      entry_points={
          "console_scripts":
          [
              "keyphrase = keyphrase.cli.cli:keyphrase",
          ]
      },
      install_requires=[
          "attrs >= 19.2.0", # 19.2.0 replaces cmp parameter with eq/order
          "twisted",
          "zope.interface",
          "click",
      ],
      extras_require={
          "dev": [
              "tox",
              "pyflakes",
              "pytest",
              "hypothesis",
          ],
      },
      test_suite="keyphrase.test",
      )

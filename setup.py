#!/usr/bin/env python

import logging
import sys
import isochron.info

if sys.hexversion < 0x03070000:
    logging.error("isochron requires Python Version 3.7 (or greater)")
else:
    from setuptools import setup

    with open('README.rst') as f:
        long_description = f.read()

    setup(name=isochron.info.name,
          version=isochron.info.version,
          description=isochron.info.title,
          long_description=long_description,
          url=isochron.info.home,
          packages=['isochron'],
          python_requires='>=3.7',
          extras_require={'test': ['pytest']},
          classifiers=['Development Status :: 3 - Alpha',
                       'Intended Audience :: Developers',
                       'Natural Language :: English',
                       'License :: OSI Approved :: BSD License',
                       'Operating System :: OS Independent',
                       'Programming Language :: Python',
                       'Programming Language :: Python :: 3',
                       'Topic :: Software Development :: '
                       'Libraries :: Python Modules']
          )

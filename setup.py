# -*- coding: utf-8 -*-
from setuptools import setup

package_dir = \
{'': 'python'}

packages = \
['formtree',
 'formtree.client',
 'formtree.client.commands',
 'formtree.editors',
 'formtree.tree']

package_data = \
{'': ['*']}

install_requires = \
['aiohttp', 'jinja2', 'pyyaml', 'typing-extensions']

extras_require = \
{'test': ['pytest', 'pytest-asyncio']}

entry_points = \
{'console_scripts': ['formtreectl = formtree.client.main:main']}

setup_kwargs = {
    'name': 'formtree',
    'version': '0.4.0',
    'description': 'Compiles JSON schemas into live field trees with values, errors and conditional fields',
    'long_description': "# formtree\n\nCompiles a JSON-Schema document into a tree of fields that produces and accepts JSON values, routes errors addressed by JSON pointers to the fields and shows or hides fields depending on the values of their siblings.\n\nThe presentation layer plugs in through editors, headless reference editors are included.\n",
    'package_dir': package_dir,
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'entry_points': entry_points,
    'python_requires': '>=3.8,<4.0',
}

setup(**setup_kwargs)


# This setup.py was autogenerated using Poetry for backward compatibility with setuptools.

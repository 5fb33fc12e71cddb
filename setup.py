import io
import re
import setuptools

with io.open('src/releaserc/__init__.py', encoding='utf8') as fp:
  version = re.search(r'__version__\s*=\s*"(.*)"', fp.read()).group(1)

with io.open('README.md', encoding='utf8') as fp:
  long_description = fp.read()

requirements = [
  'cleo >=2.0.0,<3.0.0',
  'databind >=4.4.0,<5.0.0',
  'importlib-metadata >=4.0.0',
  'PyYAML >=5.1.0,<7.0.0',
  'tomli >=2.0.0,<3.0.0',
  'tomli-w >=1.0.0,<2.0.0',
  'typing-extensions >=4.0.0',
]

setuptools.setup(
  name = 'releaserc',
  version = version,
  description = 'The release configuration of the project: release branches, prerelease channels and the release plugin pipeline.',
  long_description = long_description,
  long_description_content_type = 'text/markdown',
  license = 'MIT',
  packages = setuptools.find_packages('src', ['test', 'test.*', 'docs', 'docs.*']),
  package_dir = {'': 'src'},
  include_package_data = False,
  install_requires = requirements,
  extras_require = {
    'test': ['pytest >=7.0.0'],
  },
  python_requires = '>=3.10',
  entry_points = {
    'console_scripts': [
      'releaserc = releaserc.__main__:main',
    ],
    'releaserc.plugins.application': [
      'branch = releaserc.ext.application.branch:BranchCommandPlugin',
      'check = releaserc.ext.application.check:CheckCommandPlugin',
      'init = releaserc.ext.application.init:InitCommandPlugin',
      'pipeline = releaserc.ext.application.pipeline:PipelineCommandPlugin',
      'show = releaserc.ext.application.show:ShowCommandPlugin',
    ],
  }
)

from pathlib import Path

import setuptools

root_dirpath = Path(__file__).parent

init_filepath = root_dirpath / 'src' / 'geokit' / '__init__.py'
with open(str(init_filepath), encoding='utf-8') as f:
    for line in f:
        if line.startswith('__version__'):
            version = line.split('"')[1]
            break

readme_filepath = root_dirpath / 'README.md'
with open(str(readme_filepath), encoding='utf-8') as f:
    long_description = f.read()

requirements_filepath = root_dirpath / 'requirements.txt'
with open(str(requirements_filepath), encoding='utf-8') as f:
    requirements = [line for line in f.read().splitlines() if line.strip()]

setuptools.setup(
    name='geokit',
    version=version,
    description='Geometry model and GeoJSON codec',
    long_description=long_description,
    long_description_content_type='text/markdown',
    package_dir={'': 'src'},
    packages=setuptools.find_namespace_packages(
        where='src', include=['geokit', 'geokit.*']
    ),
    install_requires=requirements,
    extras_require={'test': ['pytest']},
    python_requires='>=3.10',
)

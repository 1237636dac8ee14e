from setuptools import setup, find_packages


with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='tx_attributes',
    version='0.1.0',
    description='声明式事务属性：传播方式、隔离级别与事务定义，供sqlalchemy事务管理器读取。',
    long_description=long_description,
    keywords='transaction,propagation,isolation,sqlalchemy',
    long_description_content_type="text/markdown",
    license='MIT',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'sqlalchemy>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.8',
)

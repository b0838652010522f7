"""Setup script"""

from setuptools import setup

def readme():
    """Returns the contents of README.rst"""

    with open('README.rst') as readme_file:
        return readme_file.read()

setup(name='evlsyslog',
    version='1.0.0',
    description='Listener for the syslog output of EnvisaLink (EVL3/EVL4) alarm panel '
                'network modules: zone, arm/disarm, alarm and Contact ID events.',
    long_description=readme(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Communications',
        'Topic :: Home Automation',
        'Topic :: Security',
        'Topic :: System :: Logging',
    ],
    keywords='envisalink evl4 syslog alarm contact id ademco honeywell dsc security',
    license='MIT',
    packages=['evlsyslog', 'evlsyslog.devices', 'evlsyslog.event', 'evlsyslog.messages',
              'evlsyslog.messages.cid', 'evlsyslog.sinks'],
    python_requires='>=3.7',
    install_requires=[
        'httpx>=0.23',
    ],
    extras_require={
        'test': ['pytest', 'mock'],
    },
    entry_points={
        'console_scripts': [
            'evl-syslog-listener = evlsyslog.cli:main',
            'evl-send-test-event = evlsyslog.cli:send_test_event',
        ],
    },
    include_package_data=True,
    zip_safe=False)

from setuptools import setup

setup(
    use_scm_version={
        "local_scheme": "no-local-version",
        "fallback_version": "0.1.0",
    }
)

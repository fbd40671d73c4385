"""Invoke tasks for rpmsnap project."""

from invoke import task


@task
def test(c, suite="", verbose=False, coverage=False):
    """Run the test suite.

    Args:
        suite: "unit" or "integration" to run only that directory
        verbose: Show verbose output
        coverage: Report coverage for the rpmsnap package
    """
    cmd = f"pytest tests/{suite}" if suite else "pytest"
    if verbose:
        cmd += " -v"
    if coverage:
        cmd += " --cov=rpmsnap --cov-report=term-missing"
    c.run(cmd)


@task
def format(c, check=False):
    """Format code with black."""
    cmd = "black rpmsnap/ tests/"
    if check:
        cmd += " --check"
    c.run(cmd)


@task
def lint(c, fix=False):
    """Lint code with ruff."""
    cmd = "ruff check rpmsnap/ tests/"
    if fix:
        cmd += " --fix"
    c.run(cmd)


@task
def typecheck(c):
    c.run("mypy rpmsnap/")


@task
def quality(c, fix=False):
    """Run format, lint and typecheck."""
    format(c, check=not fix)
    lint(c, fix=fix)
    typecheck(c)
    print("✅ All quality checks complete!")


@task
def clean(c):
    """Remove caches and build leftovers."""
    for pattern in ["build/", "dist/", "*.egg-info", "**/__pycache__", ".pytest_cache/", ".coverage", ".mypy_cache/", ".ruff_cache/"]:
        c.run(f"rm -rf {pattern}", warn=True)


@task
def install(c, dev=False):
    """Install the package in editable mode.

    Args:
        dev: Include development dependencies
    """
    c.run("pip install -e '.[dev]'" if dev else "pip install -e .")


@task
def snapshot(c, home="/tmp/rpmsnap-dev"):
    """Do a snapshot run against a scratch install root.

    Args:
        home: Install root; the inventory script must exist at <home>/sbin/rpmsnap.pl
    """
    c.run(f"rpmsnap --verbose run --report {home}/last-run.json", env={"RPMSNAP_HOME": home})


@task(pre=[quality, test])
def ci(c):
    """Run all CI checks (quality + tests)."""
    print("✅ All CI checks passed!")

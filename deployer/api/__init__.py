"""HTTP API for Repo Deployer."""

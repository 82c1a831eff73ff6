from setuptools import setup, find_packages

setup(
    name="progressive-workflow",
    version="0.1.0",
    description="Progressive disclosure prompting workflows with step-by-step prompt retrieval",
    author="Progressive Workflow Team",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    install_requires=[
        "pydantic>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pyyaml>=6.0",
            "black>=22.0.0",
            "isort>=5.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "get_next_prompt=progressive_workflow.cli:get_next_prompt_main",
            "get_workflow_args=progressive_workflow.cli:get_workflow_args_main",
            "get_workflow_catalog=progressive_workflow.cli:get_workflow_catalog_main",
        ],
    },
    python_requires=">=3.8",
)

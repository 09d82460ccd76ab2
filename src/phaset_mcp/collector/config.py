"""
Configuration for the BudgetedCollector module.
Defines depth profiles, exclusion rules, priority heuristics and budget limits
for manifest file collection.
"""

# Hard limit for characters kept per file (~12.5k tokens).
# Anything beyond is replaced by a truncation notice.
MAX_FILE_CHARS = 50000

# Budget for all file contents combined, in estimated tokens.
MAX_TOTAL_TOKENS = 15000

# Maximum directory recursion depth (root = 0).
MAX_DEPTH = 10

# Rough estimate used for token accounting: 1 token ~ 4 characters.
CHARS_PER_TOKEN = 4

TRUNCATION_NOTICE = "\n\n... [Content truncated - file too large. Showing first {max_chars} characters]"

DEFAULT_PROFILE = "standard"

# Package manager files, READMEs and licenses.
MINIMAL_PATTERNS = [
    "package.json",
    "package-lock.json",
    "go.mod",
    "go.sum",
    "pom.xml",
    "build.gradle",
    "build.gradle.kts",
    "requirements.txt",
    "setup.py",
    "pyproject.toml",
    "Cargo.toml",
    "Cargo.lock",
    "Gemfile",
    "Gemfile.lock",
    "composer.json",
    "README.md",
    "README.txt",
    "README",
    "readme.md",
    "LICENSE",
    "LICENSE.txt",
    "LICENSE.md",
]

# Adds deployment, CI/CD and API specification files.
STANDARD_PATTERNS = MINIMAL_PATTERNS + [
    "Dockerfile",
    "Dockerfile.*",
    "docker-compose.yml",
    "docker-compose.yaml",
    ".dockerignore",
    ".github/workflows/*.yml",
    ".github/workflows/*.yaml",
    ".gitlab-ci.yml",
    "azure-pipelines.yml",
    "Jenkinsfile",
    "openapi.yaml",
    "openapi.yml",
    "openapi.json",
    "swagger.json",
    "swagger.yaml",
    "swagger.yml",
    "api-spec.yaml",
    "api-spec.yml",
    "schema.graphql",
    "*.graphql",
    "CODEOWNERS",
    ".env.example",
    ".env.sample",
    "Makefile",
    "justfile",
]

# Adds infrastructure-as-code and cloud deployment descriptors.
DEEP_PATTERNS = STANDARD_PATTERNS + [
    "terraform/**/*.tf",
    "terraform/*.tf",
    "k8s/**/*.yaml",
    "k8s/**/*.yml",
    "kubernetes/**/*.yaml",
    "kubernetes/**/*.yml",
    ".k8s/**/*.yaml",
    "helm/**/*.yaml",
    "config/*.json",
    "config/*.yaml",
    "config/*.yml",
    ".circleci/config.yml",
    "bitbucket-pipelines.yml",
    "cloudbuild.yaml",
    "skaffold.yaml",
    "serverless.yml",
    "serverless.yaml",
]

DEPTH_PROFILES = {
    "minimal": tuple(MINIMAL_PATTERNS),
    "standard": tuple(STANDARD_PATTERNS),
    "deep": tuple(DEEP_PATTERNS),
}

# Paths to ALWAYS ignore.
# These prevent collection of dependencies, build artifacts, or environments.
DEFAULT_EXCLUDE_PATTERNS = (
    "node_modules/**",
    ".git/**",
    "dist/**",
    "build/**",
    "target/**",
    ".next/**",
    "out/**",
    "vendor/**",
    ".venv/**",
    "venv/**",
    "__pycache__/**",
    "*.pyc",
    ".idea/**",
    ".vscode/**",
    "coverage/**",
    ".coverage/**",
)

# Priority ranks (lower = more important).
PRIORITY_ROOT_MANIFEST = 1
PRIORITY_README = 2
PRIORITY_PACKAGE_MANIFEST = 3
PRIORITY_API_SPEC = 4
PRIORITY_CONTAINER = 5
PRIORITY_CI = 6
PRIORITY_DEFAULT = 7
PRIORITY_INFRASTRUCTURE = 8

PACKAGE_MANIFESTS = {
    "go.mod",
    "pom.xml",
    "build.gradle",
    "Cargo.toml",
    "pyproject.toml",
    "setup.py",
    "requirements.txt",
    "Gemfile",
    "composer.json",
}

CONTAINER_FILES = {"Dockerfile", "docker-compose.yml", "docker-compose.yaml"}

CI_FILES = {".gitlab-ci.yml", "Jenkinsfile"}
CI_DIR_MARKER = ".github/workflows"

INFRASTRUCTURE_MARKERS = ("terraform/", "k8s/", "kubernetes/")

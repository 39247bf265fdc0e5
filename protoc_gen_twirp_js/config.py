"""Fixed settings for the generator.

Everything the generated code depends on by name lives here: the runtime
module it requires, the suffixes that make up output file names and the
template used for the file header.
"""

from __future__ import annotations

from pathlib import Path

GENERATOR_NAME = "protoc-gen-twirp_js"

# require() target of the Twirp runtime in generated code
RUNTIME_MODULE = "twirp"

# Schema file extensions stripped before building output names
SCHEMA_EXTENSIONS: tuple[str, ...] = (".proto", ".protodevel")

MESSAGE_SUFFIX = "_pb"
CLIENT_SUFFIX = "_twirp.js"

TEMPLATE_DIR = Path(__file__).parent / "templates"
HEADER_TEMPLATE = "header.js.j2"

LOG_LEVEL_ENV = "PROTOC_GEN_TWIRP_JS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

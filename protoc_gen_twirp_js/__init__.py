"""protoc plugin generating Twirp JavaScript clients."""

VERSION = "v0.1.0"

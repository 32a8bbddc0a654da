# What it does: Produces the text of the repository's `config` file
# How it does: Fills a `configparser.ConfigParser` with the `[core]` section and serializes it into a string, so the caller decides where the text is stored
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import io

REPOSITORY_FORMAT_VERSION = 0


def build_core_config(bare): # Returns a ConfigParser holding the settings every new repository starts with
    config = configparser.ConfigParser()
    config.add_section('core')
    config.set('core', 'repositoryformatversion', str(REPOSITORY_FORMAT_VERSION))
    config.set('core', 'filemode', 'true')
    config.set('core', 'bare', 'true' if bare else 'false')
    return config


def render_core_config(bare): # Serializes the default config to INI text
    buffer = io.StringIO()
    build_core_config(bare).write(buffer)
    # configparser ends every section with a blank line, the file ends right after `bare`
    return buffer.getvalue().rstrip('\n') + '\n'

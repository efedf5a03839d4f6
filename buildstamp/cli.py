import click
import sys
from typing import Optional

from . import __version__
from .exceptions import BuildStampError
from .utils import load_config, setup_logging
from .versioning import (
    BuildStrategy,
    RevisionStrategy,
    Version,
    VersionEngine,
)
from .versioning.store import (
    BUILD_STRATEGIES_REQUIRING_FILE,
    REVISION_STRATEGIES_REQUIRING_FILE,
)
from .emitters import AssemblyInfoBuilder, get_emitter, get_supported_languages

DEFAULT_OUTPUT_STEM = 'AssemblyInfo'


def _fail(error: Exception, verbose: bool = False):
    click.echo(f"❌ Error: {error}", err=True)
    if verbose:
        import traceback
        traceback.print_exc()
    sys.exit(1)


@click.command('version')
@click.option('--config', '-c',
              type=click.Path(exists=True),
              help='Configuration file path')
@click.option('--major',
              type=int,
              help='Major version number (default: 1)')
@click.option('--minor',
              type=int,
              help='Minor version number (default: 0)')
@click.option('--build-type', '-b',
              type=click.Choice(BuildStrategy.names(), case_sensitive=False),
              help='Build number strategy')
@click.option('--revision-type', '-r',
              type=click.Choice(RevisionStrategy.names(), case_sensitive=False),
              help='Revision number strategy')
@click.option('--starting-date', '-s',
              help='Project starting date used by the calendar strategies (e.g. 2008-01-01)')
@click.option('--version-file', '-f',
              type=click.Path(dir_okay=False),
              help='File storing the previous version (required by Fixed/Increment strategies)')
@click.option('--verbose', '-v',
              is_flag=True,
              help='Enable verbose logging')
def version_command(config: Optional[str],
                    major: Optional[int],
                    minor: Optional[int],
                    build_type: Optional[str],
                    revision_type: Optional[str],
                    starting_date: Optional[str],
                    version_file: Optional[str],
                    verbose: bool):
    """
    Generate the next version number and print it.

    The version file, when given, is read before and overwritten after
    generation if the selected strategies depend on the previous version.
    """
    try:
        # Load configuration
        app_config = load_config(config or 'buildstamp.yaml')
        version_config = app_config['version']

        # Override config with CLI options
        if major is not None:
            version_config['major'] = major
        if minor is not None:
            version_config['minor'] = minor
        if build_type:
            version_config['build_type'] = build_type
        if revision_type:
            version_config['revision_type'] = revision_type
        if starting_date:
            version_config['starting_date'] = starting_date
        if version_file is not None:
            version_config['version_file'] = version_file
        if verbose:
            app_config['logging']['level'] = 'DEBUG'

        setup_logging(app_config['logging'])

        engine = VersionEngine.from_config(version_config)
        new_version = engine.generate()
    except (BuildStampError, OSError) as e:
        _fail(e, verbose)

    click.echo(str(new_version))


@click.command('assembly-info')
@click.option('--config', '-c',
              type=click.Path(exists=True),
              help='Configuration file path')
@click.option('--language', '-l',
              help='Source language of the generated file (csharp, vb)')
@click.option('--output', '-o',
              type=click.Path(dir_okay=False),
              help='Path of the generated source file (default: AssemblyInfo.cs or AssemblyInfo.vb)')
@click.option('--assembly-version',
              help='Value of the AssemblyVersion attribute')
@click.option('--file-version',
              help='Value of the AssemblyFileVersion attribute')
@click.option('--informational-version',
              help='Value of the AssemblyInformationalVersion attribute (free text)')
@click.option('--cls-compliant/--no-cls-compliant',
              default=None,
              help='Mark the assembly as CLS-compliant')
@click.option('--verbose', '-v',
              is_flag=True,
              help='Enable verbose logging')
def assembly_info(config: Optional[str],
                  language: Optional[str],
                  output: Optional[str],
                  assembly_version: Optional[str],
                  file_version: Optional[str],
                  informational_version: Optional[str],
                  cls_compliant: Optional[bool],
                  verbose: bool):
    """Generate a source file containing assembly metadata attributes."""
    try:
        app_config = load_config(config or 'buildstamp.yaml')
        info_config = app_config['assembly_info']

        if language:
            info_config['language'] = language
        if output:
            info_config['output'] = output
        if informational_version is not None:
            info_config['informational_version'] = informational_version
        if cls_compliant is not None:
            info_config['cls_compliant'] = cls_compliant
        if verbose:
            app_config['logging']['level'] = 'DEBUG'

        logger = setup_logging(app_config['logging'])

        emitter = get_emitter(info_config['language'])
        if not info_config.get('output'):
            info_config['output'] = f"{DEFAULT_OUTPUT_STEM}{emitter.file_extension}"

        builder = AssemblyInfoBuilder(emitter)

        if info_config.get('cls_compliant'):
            logger.info("Adding CLSCompliantAttribute.")
            builder.with_cls_compliant(True)

        if assembly_version and assembly_version.strip():
            logger.info(f"Adding AssemblyVersionAttribute ({assembly_version}).")
            builder.with_assembly_version(Version.parse(assembly_version))

        if file_version and file_version.strip():
            logger.info(f"Adding AssemblyFileVersionAttribute ({file_version}).")
            builder.with_assembly_file_version(Version.parse(file_version))

        informational = info_config.get('informational_version')
        if informational and str(informational).strip():
            logger.info(f"Adding AssemblyInformationalVersionAttribute ({informational}).")
            builder.with_assembly_informational_version(str(informational))

        path = builder.save(info_config['output'])
        logger.info(f"AssemblyInfo file saved to '{path}'.")
    except (BuildStampError, OSError) as e:
        _fail(e, verbose)

    click.echo(f"✅ Assembly information saved to: {path}")


@click.command('strategies')
def strategies():
    """List the available build and revision numbering strategies."""
    click.echo("Build strategies:")
    for strategy in BuildStrategy:
        marker = " (version file)" if strategy in BUILD_STRATEGIES_REQUIRING_FILE else ""
        click.echo(f"  {strategy.value}{marker}")

    click.echo("Revision strategies:")
    for strategy in RevisionStrategy:
        marker = " (version file)" if strategy in REVISION_STRATEGIES_REQUIRING_FILE else ""
        click.echo(f"  {strategy.value}{marker}")

    click.echo(f"Languages: {', '.join(sorted(get_supported_languages()))}")


@click.group()
@click.version_option(version=__version__, prog_name="buildstamp")
def main():
    """buildstamp - Generate build version numbers and assembly information files."""
    pass


# Add commands to the main group
main.add_command(version_command)
main.add_command(assembly_info)
main.add_command(strategies)


if __name__ == '__main__':
    main()

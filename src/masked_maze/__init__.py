import click

from masked_maze.generate_maze_script import generate_maze_command
from masked_maze.stats_runner import stats_command


@click.group()
def cli():
    """Masked Maze - random mazes with a guaranteed route, drawn as text."""
    pass


cli.add_command(generate_maze_command)
cli.add_command(stats_command)

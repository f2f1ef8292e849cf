from commandeer import Program
from commandeer.utils import setup_logging

setup_logging()


def parse_level(token, previous):
    level = int(token)
    if not 0 <= level <= 9:
        raise ValueError("level must be between 0 and 9")
    return level


def create_zip(src_dir, dest_dir, excludes, options):
    excluded = ", ".join(excludes or []) or "nothing"
    return (
        f"Zipping {src_dir} into {dest_dir} at level {options['level']}, "
        f"excluding {excluded}."
    )


def unzip(zip_path, dest_dir, options):
    target = dest_dir or "the current directory"
    if not options["makesDir"]:
        return f"Unzipping {zip_path} into {target} without a new directory."
    return f"Unzipping {zip_path} into {target}."


program = Program(program_name="zip_tools.py")
program.add_programs(
    [
        {
            "command": "createZip <srcDir> <destDir> [excludes...]",
            "description": "Create a zip archive",
            "version": "1.0.0",
            "options": [["-l, --level <n>", "Compression level", parse_level, 6]],
            "action": create_zip,
        },
        {
            "command": "unZip <zipPath> [destDir]",
            "options": [
                ["-N, --no-makes-dir", "None create a new directory"],
                ["-P, --pwd <password>", "unzip password"],
            ],
            "action": unzip,
        },
    ]
)

if __name__ == "__main__":
    print(program.run())

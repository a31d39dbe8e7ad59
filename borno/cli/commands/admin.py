"""CLI commands for editing the dictionary."""

from borno.cli.commands.common import build_controller, find_entry


def add_command(args) -> int:
    """Create or update an entry, optionally filled in by AI."""
    controller = build_controller(args)
    presenter = controller.presenter

    existing = controller.entry_store.find_by_word(args.word)
    if existing is not None:
        session = controller.edit_entry(existing.id)
    else:
        session = controller.new_entry(args.word)
    if session is None:
        return 1

    changes = {
        name: value
        for name, value in (
            ("translation", args.translation),
            ("meaning", args.meaning),
            ("part_of_speech", args.pos),
            ("description", args.description),
        )
        if value is not None
    }
    if args.synonym:
        changes["synonyms"] = args.synonym
    if args.example:
        changes["examples"] = args.example
    if args.language:
        changes["language"] = args.language
    if changes and not controller.update_draft(**changes):
        return 1

    if args.enrich and not controller.enrich_draft(args.language, overwrite=args.overwrite):
        if not args.save_anyway:
            presenter.show_info("Nothing saved. Re-run to try again, or pass --save-anyway.")
            controller.cancel_edit()
            return 1

    saved = controller.save_draft()
    if saved is None:
        return 1
    presenter.show_entry(saved, is_favorite=controller.is_favorite(saved))
    return 0


def delete_command(args) -> int:
    """Delete an entry by headword."""
    controller = build_controller(args)
    entry = find_entry(controller, args.word)
    if entry is None:
        return 1
    controller.delete_entry(entry.id)
    controller.presenter.show_success(f"Deleted {entry.word}")
    return 0

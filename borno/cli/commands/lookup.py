"""CLI commands for searching and browsing the dictionary."""

from borno.cli.commands.common import build_controller, find_entry


def search_command(args) -> int:
    """Search entries, or list all of them when no query is given."""
    controller = build_controller(args)
    query = " ".join(args.query)

    if args.topic:
        results = controller.select_topic(args.topic)
        if results is None:
            return 1
        query = controller.query
    else:
        results = controller.entry_store.search(query)

    title = f"Results for '{query}'" if query.strip() else "All words"
    controller.presenter.show_entries(results, title=title)
    return 0


def show_command(args) -> int:
    """Show one entry and record it in history."""
    controller = build_controller(args)
    entry = find_entry(controller, args.word)
    if entry is None:
        results = controller.entry_store.search(args.word)
        if results:
            controller.presenter.show_entries(results, title="Did you mean")
        return 1
    return 0 if controller.select_entry(entry) is not None else 1


def favorite_command(args) -> int:
    """Toggle an entry's favorite state."""
    controller = build_controller(args)
    entry = find_entry(controller, args.word)
    if entry is None:
        return 1
    controller.toggle_favorite(entry)
    return 0


def favorites_command(args) -> int:
    controller = build_controller(args)
    controller.presenter.show_entries(controller.favorite_entries(), title="Favorites")
    return 0


def history_command(args) -> int:
    """Show or clear recent-search history."""
    controller = build_controller(args)
    if args.clear:
        controller.clear_history()
        controller.presenter.show_success("History cleared")
        return 0

    controller.history_entries()  # drops records of deleted entries
    controller.presenter.show_history(controller.history_log.list())
    return 0


def topics_command(args) -> int:
    controller = build_controller(args)
    for topic in controller.study_topics():
        controller.presenter.show_info(f"{topic.id:12s} {topic.label} - {topic.subtitle}")
    return 0

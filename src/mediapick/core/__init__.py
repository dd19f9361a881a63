"""Media helpers for the remux workflow: titles, languages, subtitles, mkvmerge."""

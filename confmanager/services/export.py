"""Export service - CSV listing of submitted articles."""
import csv
import io


def export_articles_csv(articles, conferences, users, assignments):
    """Export articles to CSV, one row per article."""
    conference_names = {c.id: c.name for c in conferences}
    user_names = {u.id: u.name or u.email for u in users}
    reviewers_by_article = {}
    for assignment in assignments:
        reviewers_by_article.setdefault(assignment.article_id, []).append(
            user_names.get(assignment.reviewer_id, assignment.reviewer_id)
        )

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(['ID', 'Title', 'Author', 'Conference', 'Status', 'Version', 'Keywords', 'Reviewers', 'File'])

    for article in articles:
        writer.writerow([
            article.id,
            article.title,
            user_names.get(article.user_id, ''),
            conference_names.get(article.conference_id, ''),
            article.status,
            article.version,
            ', '.join(article.keyword_list),
            ', '.join(sorted(reviewers_by_article.get(article.id, []))),
            article.file_url,
        ])

    return output.getvalue()

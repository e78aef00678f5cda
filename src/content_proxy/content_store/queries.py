"""GROQ queries issued against the content store."""

BLOG_POST_QUERY = """*[_type == "blog" && slug.current == $slug][0]{
  title,
  shortDescription,
  body,
  "mainPhotoUrl": mainPhoto.asset->url,
  "mainPhotoAlt": mainPhoto.alt,
  publishedAt,
  "authors": authors[]->{ fullName }
}"""

AUTHOR_LIST_QUERY = """*[_type == "author"] | order(fullName asc) {
  _id,
  fullName,
  "slug": slug.current,
  "photoUrl": photo.asset->url
}"""

AUTHOR_INDEX_QUERY = """*[_type == "author"]{
  _id,
  fullName,
  email,
  "slug": slug.current
}"""

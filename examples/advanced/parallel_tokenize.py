"""Thread safe: tokenize 1000 pages in parallel."""

from concurrent.futures import ThreadPoolExecutor

from wikilex import tokenize

pages = ["== Page " + str(i) + " ==\n{{stub}} Content for page " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize, pages))

print(f"Tokenized {len(results)} pages in parallel")
print("First page tokens:", len(results[0]))
print("Last page tokens:", len(results[-1]))

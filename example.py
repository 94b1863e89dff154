import json
import requests

from argparse import ArgumentParser


def run(server, http=requests, out=print):
    for value in [10, 20, 30, 40, 50, 25]:
        response = http.post("http://{}/insert/{}".format(server, value))
        out("Inserted {}, size {}".format(value, response.text))

    response = http.get("http://{}/print".format(server))
    out(response.text.rstrip("\n"))

    for value in [30, 35]:
        response = http.get("http://{}/contains/{}".format(server, value))
        out("Contains {}: {}".format(value, "Yes" if response.text == "true" else "No"))

    response = http.post("http://{}/remove/30".format(server))
    out("Removed 30, size {}".format(response.text))

    response = http.get("http://{}/print".format(server))
    out(response.text.rstrip("\n"))

    response = http.get("http://{}/inorder".format(server))
    values = json.loads(response.text)
    out("Inorder traversal: " + " ".join(str(value) for value in values))
    return values


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--server", default="localhost:5000")
    args = parser.parse_args()
    run(args.server)

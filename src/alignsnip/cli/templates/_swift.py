"""Swift snippet: URLSession client wrapped in an actor."""

from alignsnip.cli.templates._base import double_quoted, swift_array
from alignsnip.core.config import TaskOptions


def render(api_key: str, source_url: str, options: TaskOptions) -> str:
    return f"""\
import Foundation

actor AudioShakeClient {{
    private let apiKey = "{double_quoted(api_key)}"
    private let baseURL = "{double_quoted(options.base_url)}"

    struct TaskResponse: Decodable {{
        let id: String
        let status: String?
        let targets: [Target]?

        struct Target: Decodable {{
            let status: String
            let output: [Output]

            struct Output: Decodable {{
                let link: String
            }}
        }}
    }}

    func align(videoURL: String) async throws -> String {{
        let taskID = try await createTask(videoURL: videoURL)
        print("Task created: \\(taskID)")

        while true {{
            let response = try await getStatus(taskID: taskID)

            guard let targets = response.targets else {{
                throw AudioShakeError.noResult
            }}

            let allComplete = targets.allSatisfy {{ $0.status == "completed" }}
            let anyFailed = targets.contains {{ $0.status == "failed" || $0.status == "error" }}

            if anyFailed {{
                throw AudioShakeError.taskFailed
            }}

            if allComplete {{
                guard let resultURL = targets.first?.output.first?.link else {{
                    throw AudioShakeError.noResult
                }}
                return resultURL
            }}

            print("Status: processing...")
            try await Task.sleep(for: .seconds(5))
        }}
    }}

    private func createTask(videoURL: String) async throws -> String {{
        let body: [String: Any] = [
            "url": videoURL,
            "targets": [[
                "model": "{double_quoted(options.model)}",
                "formats": {swift_array(options.formats)},
                "language": "{double_quoted(options.language)}"
            ]]
        ]

        var request = URLRequest(url: URL(string: "\\(baseURL)/tasks")!)
        request.httpMethod = "POST"
        request.setValue(apiKey, forHTTPHeaderField: "x-api-key")
        request.setValue("application/json", forHTTPHeaderField: "Content-Type")
        request.httpBody = try JSONSerialization.data(withJSONObject: body)

        let (data, _) = try await URLSession.shared.data(for: request)
        let response = try JSONDecoder().decode(TaskResponse.self, from: data)
        return response.id
    }}

    private func getStatus(taskID: String) async throws -> TaskResponse {{
        var request = URLRequest(url: URL(string: "\\(baseURL)/tasks/\\(taskID)")!)
        request.setValue(apiKey, forHTTPHeaderField: "x-api-key")

        let (data, _) = try await URLSession.shared.data(for: request)
        return try JSONDecoder().decode(TaskResponse.self, from: data)
    }}

    enum AudioShakeError: Error {{
        case taskFailed, noResult
    }}
}}

Task {{
    do {{
        let client = AudioShakeClient()
        let resultURL = try await client.align(videoURL: "{double_quoted(source_url)}")
        print("✅ Result: \\(resultURL)")
    }} catch let error as URLError {{
        print("❌ Network Error: \\(error.localizedDescription)")
    }} catch let error as DecodingError {{
        print("❌ Decoding Error: \\(error)")
    }} catch let error as AudioShakeClient.AudioShakeError {{
        print("❌ AudioShake Error: \\(error)")
    }} catch {{
        print("❌ Error: \\(error.localizedDescription)")
        print("Full error: \\(error)")
    }}
}}

import PlaygroundSupport
PlaygroundPage.current.needsIndefiniteExecution = true
"""
